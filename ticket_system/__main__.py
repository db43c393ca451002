# ticket_system/__main__.py
from ticket_system.main import run

if __name__ == "__main__":
    run()
