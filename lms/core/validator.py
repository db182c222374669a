"""
Stateless validation helpers shared by the model and the console.
"""

from typing import Callable

MAX_STRING_LENGTH = 100
MIN_GRADE = 0
MAX_GRADE = 100


def is_valid_email(email: str) -> bool:
    """Basic email check: ``@`` before the last ``.``, neither at an edge."""
    at_pos = email.find('@')
    dot_pos = email.rfind('.')
    return (at_pos > 0 and dot_pos != -1 and
            at_pos < dot_pos and
            dot_pos < len(email) - 1)


def is_valid_grade(grade: int) -> bool:
    return MIN_GRADE <= grade <= MAX_GRADE


def is_valid_index(index: int, size: int) -> bool:
    return 0 <= index < size


def is_valid_string(value: str) -> bool:
    return bool(value) and len(value) <= MAX_STRING_LENGTH


def read_bounded_int(prompt: str, minimum: int, maximum: int,
                     input_func: Callable[[str], str] = input,
                     output_func: Callable[[str], None] = print) -> int:
    """Prompt until an integer within ``[minimum, maximum]`` is entered.

    Non-numeric and out-of-range answers are reported and the prompt is
    repeated; nothing is raised for bad input.
    """
    while True:
        raw = input_func(prompt)
        try:
            value = int(raw.strip())
        except ValueError:
            output_func("Invalid input. Please enter a number.")
            continue
        if minimum <= value <= maximum:
            return value
        output_func(f"Please enter a number between {minimum} and {maximum}.")


class Validator:
    """Namespace exposing the validation helpers as static methods."""

    is_valid_email = staticmethod(is_valid_email)
    is_valid_grade = staticmethod(is_valid_grade)
    is_valid_index = staticmethod(is_valid_index)
    is_valid_string = staticmethod(is_valid_string)
    read_bounded_int = staticmethod(read_bounded_int)
