"""Interactive course planner.

Usage:
    course-planner [catalog.csv]
    python -m course_planner [catalog.csv]

A catalog given on the command line (or via CATALOG_PATH) is loaded before
the menu is shown.
"""

import os
import sys
from typing import Callable, Optional

from course_planner.catalog import load_catalog
from course_planner.config import Settings, load_settings
from course_planner.logger import logger
from course_planner.models import Catalog, LoadResult
from course_planner.reports import (
    format_course_detail,
    format_course_list,
    format_recommended_order,
)
from course_planner.store import check_store_connection

MENU = """
Menu Options:
1. Load Data Structure
2. Print Course List
3. Print Course Details
4. Print Recommended Course Order
5. Test Database Connection
9. Exit"""
MAX_OPTION_DIGITS = 4


class CoursePlanner:
    """Holds the active catalog and answers menu commands against it."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.catalog = Catalog()

    def load(self, path) -> LoadResult:
        """Replace the active catalog with one read from path.

        The previous catalog stays active if reading fails.
        """
        result = load_catalog(path)
        self.catalog = result.catalog
        return result

    def load_command(self, filename: str) -> None:
        filename = filename.strip()
        if not filename:
            print("No file name provided.")
            return

        try:
            result = self.load(filename)
        except (FileNotFoundError, ValueError) as err:
            logger.error(str(err))
            print(f'Error: Could not open "{filename}".')
            return

        print(f'Loaded {result.course_count} course(s) from "{filename}".')
        if result.warnings:
            print(f"Skipped or replaced {len(result.warnings)} record(s); see warnings.")

    def list_command(self) -> None:
        print("\n".join(format_course_list(self.catalog)))

    def detail_command(self, query: str) -> None:
        print("\n".join(format_course_detail(self.catalog, query)))

    def order_command(self) -> None:
        print("\n".join(format_recommended_order(self.catalog)))

    def store_command(self) -> None:
        if check_store_connection(self.settings):
            print("Connected to the database successfully!")
        else:
            print("Failed to connect to the database.")


def parse_option(choice: str) -> Optional[int]:
    """Menu number typed by the user, or None if it is not a plain ASCII number."""
    if not (choice.isascii() and choice.isdigit()) or len(choice) > MAX_OPTION_DIGITS:
        return None
    return int(choice)


def run_menu(planner: CoursePlanner, read: Callable[[str], str] = input) -> int:
    """Run the menu loop until the user exits or input ends."""
    print("Welcome to the course planner.")

    while True:
        print(MENU)
        try:
            choice = read("What would you like to do? ").strip()
        except EOFError:
            print()
            break

        option = parse_option(choice)
        if option is None:
            print(f"{choice or '(empty)'} is not a valid option.")
            continue

        try:
            match option:
                case 1:
                    planner.load_command(read("Enter the name of the data file (e.g., courses.csv): "))
                case 2:
                    planner.list_command()
                case 3:
                    planner.detail_command(read("What course do you want to know about? "))
                case 4:
                    planner.order_command()
                case 5:
                    planner.store_command()
                case 9:
                    break
                case _:
                    print(f"{choice} is not a valid option.")
        except EOFError:
            print()
            break

    print("Thank you for using the course planner!")
    return 0


def parse_args(argv):
    """Parse and validate command-line arguments.

    Args:
        argv: list of command-line arguments (excluding script name)

    Returns:
        catalog path, or None if none was given

    Raises:
        ValueError: if arguments are invalid
    """
    if len(argv) > 1:
        raise ValueError("Usage: course-planner [catalog.csv]")
    if not argv:
        return None

    catalog_path = argv[0]
    if not os.path.exists(catalog_path):
        raise ValueError(f"{catalog_path} does not exist")
    if not os.path.isfile(catalog_path):
        raise ValueError(f"{catalog_path} must be a file")

    return catalog_path


def main(argv, read: Optional[Callable[[str], str]] = None) -> int:
    catalog_path = parse_args(argv)
    settings = load_settings()
    planner = CoursePlanner(settings)

    catalog_path = catalog_path or settings.catalog_path
    if catalog_path:
        planner.load_command(catalog_path)

    return run_menu(planner, read or input)


def run():
    argv = sys.argv[1:]
    try:
        parse_args(argv)
    except ValueError as err:
        print(f"[ERROR] {err}", file=sys.stderr)
        sys.exit(1)
    sys.exit(main(argv))


if __name__ == "__main__":
    run()
