"""
Interactive Climb Log Shell

Line-oriented command loop over a ClimbCollection. The shell owns no
storage: the caller loads the collection before `run()` and saves it after.

Commands (case-insensitive):
    q, quit        quit the application
    h, help        show help
    add climb      add a climb
    add attempt    add a climb attempt
    remove climb   remove a climb
    flush          remove all climbs
    print          print all climbs

Invalid field values are reported and asked again; a duplicate or unknown
climb aborts the command without touching the collection.
"""
import logging
import sys
from typing import Callable, Dict, Optional, TextIO, TypeVar

from climblog.exceptions import (
    ClimbNotFoundError,
    DuplicateClimbError,
    ValidationFailure,
)
from climblog.models.enums import ClimbStyle, ClimbType, Performance, stars_to_display
from climblog.schemas.climb import Attempt, Climb, ClimbDate
from climblog.services.collection_store import ClimbCollection
from climblog.services.field_parsers import (
    parse_confirmation,
    parse_day,
    parse_identity_text,
    parse_month,
    parse_stars,
    parse_year,
)
from climblog.services.grade_tables import grade_prompt_hint, parse_grade
from climblog.utils import clean_input

logger = logging.getLogger(__name__)

T = TypeVar("T")

BANNER = (
    "----------------------\n"
    " welcome to climb log \n"
    "----------------------\n"
)

HELP_TEXT = (
    "valid commands\n"
    "  > q             [quit the application]\n"
    "  > quit          [quit the application]\n"
    "  > h             [prompt this help message]\n"
    "  > help          [prompt this help message]\n"
    "  > add climb     [add a climb]\n"
    "  > add attempt   [add a climb attempt]\n"
    "  > remove climb  [remove a climb]\n"
    "  > flush         [flush the database, remove all climbs]\n"
    "  > print         [print all climbs]\n"
)

TYPE_HEADER = "type: [b]oulder, [s]port, [tr] top rope, [t]rad"
STYLE_HEADER = "style: [l]ead, [t]op rope, [s]olo"
PERFORMANCE_HEADER = (
    "performance: [fe]ll, [fl]ash, [h]ung, [o]nsight, [r]edpoint, [s]end"
)

TABLE_RULE = " " + "-" * 166 + "\n"
TABLE_HEADER = (
    "|                  name                    |                 location                 |                  comments                |   type   | grade | stars | attempts |\n"
)


def format_climbs(climbs) -> str:
    """
    Render climbs as the fixed-width table shown by `print`.

    Each climb row is followed by its numbered attempts.
    """
    lines = [TABLE_RULE, TABLE_HEADER, TABLE_RULE]
    for climb in climbs:
        lines.append(
            f"| {climb.name:<40} | {climb.location:<40} | {climb.comments:<40} "
            f"| {climb.type.value:<8} | {climb.grade_label:<5} "
            f"| {stars_to_display(climb.stars):<5} | {len(climb.attempts):<8} | \n"
        )
        for number, attempt in enumerate(climb.attempts, start=1):
            lines.append(
                f"  [{number}]: {attempt.date}, {attempt.style.value}, "
                f"{attempt.performance.value}, {attempt.comments}\n"
            )
    return "".join(lines)


class ClimbLogShell:
    """Command interpreter reading from `stdin` and writing to `stdout`."""

    def __init__(
        self,
        collection: ClimbCollection,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.collection = collection
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._commands: Dict[str, Callable[[], None]] = {
            "h": self.print_help,
            "help": self.print_help,
            "add climb": self.add_climb,
            "add attempt": self.add_attempt,
            "remove climb": self.remove_climb,
            "flush": self.flush,
            "print": self.print_climbs,
        }

    # --- I/O helpers ---

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _readline(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return clean_input(line)

    def _ask(self, label: str) -> str:
        self._write(f"  > {label}: ")
        return self._readline()

    def _ask_until(self, label: str, parse: Callable[[str], T]) -> T:
        """Ask for a field until `parse` accepts the answer."""
        while True:
            answer = self._ask(label)
            try:
                return parse(answer)
            except ValidationFailure as e:
                logger.debug(f"Rejected {label!r}: {e.detail}")
                self._write(f"invalid input: `{answer}`\n")

    def _confirm(self) -> bool:
        while True:
            self._write("proceed [y/n]: ")
            answer = self._readline()
            try:
                return parse_confirmation(answer)
            except ValidationFailure:
                self._write(f"invalid input: `{answer}`\n")

    # --- loop ---

    def run(self) -> None:
        """Run until quit or end of input."""
        self._write(BANNER)
        self.print_help()
        while True:
            self._write("> ")
            try:
                if self.execute(self._readline()):
                    break
            except EOFError:
                break

    def execute(self, line: str) -> bool:
        """
        Run one command line.

        Returns:
            True if the line asks to quit
        """
        verb = clean_input(line).casefold()
        if verb in ("q", "quit"):
            return True
        if not verb:
            return False
        command = self._commands.get(verb)
        if command is None:
            self._write(f"invalid input: `{line}`\n")
            return False
        command()
        return False

    # --- commands ---

    def print_help(self) -> None:
        self._write(HELP_TEXT)

    def add_climb(self) -> None:
        name = self._ask_until("name", parse_identity_text)
        location = self._ask_until(
            "location", lambda text: parse_identity_text(text, "location")
        )
        if self.collection.exists(name, location):
            self._write(f"{DuplicateClimbError(name, location).detail}\n")
            return
        climb_type = self._ask_until(TYPE_HEADER, ClimbType.from_alias)
        grade = self._ask_until(
            f"grade: {grade_prompt_hint(climb_type)}",
            lambda text: parse_grade(text, climb_type),
        )
        stars = self._ask_until("stars: [0-4]", parse_stars)
        comments = self._ask("comments")
        self.collection.insert(
            Climb(
                name=name,
                location=location,
                type=climb_type,
                grade=grade,
                stars=stars,
                comments=comments,
            )
        )

    def add_attempt(self) -> None:
        name = self._ask("name")
        location = self._ask("location")
        index = self.collection.find(name, location)
        if index is None:
            self._write(f"{ClimbNotFoundError(name, location).detail}\n")
            return
        year = self._ask_until("year", parse_year)
        month = self._ask_until("month", parse_month)
        day = self._ask_until("day", parse_day)
        style = self._ask_until(STYLE_HEADER, ClimbStyle.from_alias)
        performance = self._ask_until(PERFORMANCE_HEADER, Performance.from_alias)
        comments = self._ask("comments")
        self.collection.append_attempt(
            index,
            Attempt(
                date=ClimbDate(year=year, month=month, day=day),
                style=style,
                performance=performance,
                comments=comments,
            ),
        )

    def remove_climb(self) -> None:
        name = self._ask("name")
        location = self._ask("location")
        index = self.collection.find(name, location)
        if index is None:
            self._write(f"{ClimbNotFoundError(name, location).detail}\n")
            return
        self._write(f"this will permanently erase `{name}` at `{location}`\n")
        if self._confirm():
            self.collection.remove_at(index)
            self._write(f"`{name}` at `{location}` erased\n")

    def flush(self) -> None:
        self._write("this will permanently erase all climbs\n")
        if self._confirm():
            self.collection.clear()
            self._write("all climbs erased\n")

    def print_climbs(self) -> None:
        self._write(format_climbs(self.collection))
