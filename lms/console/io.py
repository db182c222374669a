"""
Console input/output used by the menus.
"""

from typing import Callable, List, Sequence

from ..core.entities import Course
from ..core.validator import is_valid_email, read_bounded_int
from ..services.base import format_course_list
from ..services.results import ActionResult


class Console:
    """Thin wrapper over ``input``/``print`` so menus can be driven by scripts."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self._input = input_func
        self._output = output_func

    def write(self, message: str = "") -> None:
        self._output(message)

    def show(self, result: ActionResult) -> None:
        self._output(result.message)

    def prompt(self, message: str) -> str:
        return self._input(message).strip()

    def prompt_int(self, message: str, minimum: int, maximum: int) -> int:
        return read_bounded_int(message, minimum, maximum, self._input, self._output)

    def prompt_email(self, message: str) -> str:
        """Ask until a well-formed email is entered."""
        while True:
            email = self.prompt(message)
            if is_valid_email(email):
                return email
            self._output("Invalid email format. Please try again.")

    def confirm(self, message: str) -> bool:
        return self.prompt(message).lower().startswith('y')

    def choose(self, title: str, options: Sequence[str]) -> int:
        """Print a numbered menu and return the 1-based choice."""
        lines: List[str] = ["", title]
        lines.extend(f"{number}. {label}" for number, label in enumerate(options, 1))
        self._output("\n".join(lines))
        return self.prompt_int(f"Enter choice (1-{len(options)}): ", 1, len(options))

    def choose_course(self, heading: str, courses: Sequence[Course], prompt: str,
                      allow_back: bool = False) -> int:
        """List courses and read a position; 0 means back when allowed."""
        self._output(f"{heading}\n{format_course_list(courses)}")
        return self.prompt_int(prompt, 0 if allow_back else 1, len(courses))
