"""
Interactive menu over the record store.
Run: python menu.py
"""

import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from config import get_settings
from repositories import FileStore, InitializationError, StoreError, StoreProtocol
from schemas.records import UserRecord

logger = logging.getLogger(__name__)

MENU = """
Choose an operation:
1. Add a new user
2. Read a user by name
3. Read all users
4. Delete a user by name
5. Exit"""


class Menu:
    """Five-choice command loop. Store errors are printed, never fatal."""

    def __init__(
        self,
        store: StoreProtocol,
        collection: str,
        stdin: TextIO = sys.stdin,
        stdout: TextIO = sys.stdout,
    ):
        self.store = store
        self.collection = collection
        self.stdin = stdin
        self.stdout = stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def add_user(self) -> None:
        name = self._ask("Name: ")
        age = self._ask("Age: ")
        company = self._ask("Company: ")
        address = self._ask("Address: ")
        try:
            user = UserRecord(Name=name, Age=age, Company=company, Address=address)
            self.store.write(self.collection, name, user)
        except (StoreError, ValidationError) as e:
            self._print(f"Error writing user: {e}")
            return
        self._print(f"User {name} added successfully.")

    def read_user(self) -> None:
        name = self._ask("Enter user name to read: ")
        try:
            user = self.store.read(self.collection, name, model=UserRecord)
        except StoreError as e:
            self._print(f"Error reading user {name}: {e}")
            return
        self._print(f"Retrieved user {name}: {user.model_dump()}")

    def read_all(self) -> None:
        try:
            users = self.store.read_all(self.collection, model=UserRecord)
        except StoreError as e:
            self._print(f"Error reading all users: {e}")
            return
        self._print("All users retrieved:")
        for user in users:
            self._print(str(user.model_dump()))

    def delete_user(self) -> None:
        name = self._ask("Enter user name to delete: ")
        try:
            self.store.delete(self.collection, name)
        except StoreError as e:
            self._print(f"Error deleting user {name}: {e}")
            return
        self._print(f"User {name} deleted successfully.")

    def run(self) -> None:
        actions = {
            "1": self.add_user,
            "2": self.read_user,
            "3": self.read_all,
            "4": self.delete_user,
        }
        while True:
            self._print(MENU)
            try:
                choice = self._ask("Enter your choice: ")
                if choice == "5":
                    self._print("Exiting program.")
                    return
                action = actions.get(choice)
                if action is None:
                    self._print("Invalid choice, please try again.")
                    continue
                action()
            except EOFError:
                self._print("Exiting program.")
                return


def main() -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    try:
        store = FileStore(settings.RECORDSTORE_DATA_DIR)
    except InitializationError as e:
        logger.error("Store initialization failed: %s", e)
        print(f"Error initializing database: {e}")
        return 1
    Menu(store, settings.RECORDSTORE_COLLECTION).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
