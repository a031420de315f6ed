"""
Contact book CLI.
Run: python -m contactbook_cli --contacts contacts.csv --connections connections.csv suggest Alice
"""

from contactbook_cli.app import app

if __name__ == "__main__":
    app(prog_name="contactbook")
