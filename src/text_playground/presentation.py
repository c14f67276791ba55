"""
Turns raw user input into what the page displays.

Each handler mirrors one button of the page: blank input is answered with an
error panel, anything else is passed to exactly one text operation.
"""

from collections.abc import Callable, Sequence

from text_playground.models import DisplayResult, Operation
from text_playground.text_utils import (
    WordLetterCount,
    count_letters,
    count_letters_per_word,
    to_lower_case,
    to_title_case,
    to_upper_case,
)

EMPTY_INPUT_MESSAGE = "Please enter some text first!"


def is_blank(text: str) -> bool:
    return not text.strip()


def empty_input_result() -> DisplayResult:
    return DisplayResult(title="Error", content=EMPTY_INPUT_MESSAGE, is_error=True)


def format_letter_count(total: int, words: Sequence[WordLetterCount]) -> str:
    lines = [f"Total letters: {total}", ""]
    if words:
        lines.append("Letters per word:")
        lines.extend(f'"{item.word}" → {item.count} letters' for item in words)
    return "\n".join(lines) + "\n"


def handle_uppercase(text: str) -> DisplayResult:
    if is_blank(text):
        return empty_input_result()
    return DisplayResult(title="Uppercase Result:", content=to_upper_case(text))


def handle_lowercase(text: str) -> DisplayResult:
    if is_blank(text):
        return empty_input_result()
    return DisplayResult(title="Lowercase Result:", content=to_lower_case(text))


def handle_title_case(text: str) -> DisplayResult:
    if is_blank(text):
        return empty_input_result()
    return DisplayResult(title="Title Case Result:", content=to_title_case(text))


def handle_count_letters(text: str) -> DisplayResult:
    if is_blank(text):
        return empty_input_result()
    content = format_letter_count(count_letters(text), count_letters_per_word(text))
    return DisplayResult(title="Letter Count:", content=content)


HANDLERS: dict[Operation, Callable[[str], DisplayResult]] = {
    Operation.UPPERCASE: handle_uppercase,
    Operation.LOWERCASE: handle_lowercase,
    Operation.TITLECASE: handle_title_case,
    Operation.COUNT: handle_count_letters,
}


def dispatch(operation: Operation, text: str) -> DisplayResult:
    return HANDLERS[operation](text)
