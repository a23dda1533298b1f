import logging
import re
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Default delimiters: comma or newline.
default_pattern = r'[,\n]'

# Header form: //<delimiter>\n<numbers>
header_pattern = re.compile(r'^//(.+)\n')

# Operands: ASCII digits with an optional sign, nothing else.
operand_pattern = re.compile(r"[+-]?[0-9]+")


class NegativeNumbersError(ValueError):
    def __init__(self, negatives):
        self.negatives = list(negatives)
        super().__init__(negative_message(self.negatives))


class InvalidNumberError(ValueError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"invalid number '{token}'")


def negative_message(negatives):
    return f"negative numbers not allowed {', '.join(map(str, negatives))}"


@dataclass(frozen=True)
class Sum:
    value: int


@dataclass(frozen=True)
class NegativeOperands:
    negatives: tuple

    def __post_init__(self):
        if not self.negatives:
            raise ValueError("NegativeOperands needs at least one negative")

    @property
    def message(self):
        return negative_message(self.negatives)


def parse_header(numbers):
    """Split an optional ``//<delimiter>\\n`` header off the input.

    Returns ``(delimiter, body)``. ``delimiter`` is None when the input has
    no well-formed header, in which case the body is the whole input.
    """
    match = header_pattern.match(numbers)
    if not match:
        return None, numbers
    return match.group(1), numbers[match.end():]


class StringCalculator:
    def add(self, numbers):
        if numbers == "":
            return 0

        operands = self.operands(numbers)

        negatives = [number for number in operands if number < 0]
        if negatives:
            raise NegativeNumbersError(negatives)

        return sum(operands)

    def operands(self, numbers):
        """Parse every operand in left-to-right order, negatives included."""
        # Callers may pass an escaped "\n" instead of a real line break
        numbers = numbers.replace('\\n', '\n')

        delimiter, body = parse_header(numbers)
        if delimiter is None:
            split_pattern = default_pattern
            logger.debug("Splitting on the default delimiters (comma, newline)")
        else:
            # Custom delimiter is literal text, not a pattern
            split_pattern = re.escape(delimiter)
            logger.debug("Splitting on custom delimiter %r", delimiter)

        parts = [part.strip() for part in re.split(split_pattern, body) if part.strip()]

        operands = []
        for part in parts:
            if not operand_pattern.fullmatch(part):
                raise InvalidNumberError(part)
            operands.append(int(part))
        logger.debug("Parsed %d operands", len(operands))
        return operands

    def try_add(self, numbers):
        """Like ``add`` but returns ``NegativeOperands`` instead of raising."""
        try:
            return Sum(self.add(numbers))
        except NegativeNumbersError as e:
            return NegativeOperands(tuple(e.negatives))


_calculator = StringCalculator()


def add(numbers):
    return _calculator.add(numbers)


def try_add(numbers):
    return _calculator.try_add(numbers)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    numbers = argv[0] if argv else ""
    try:
        print(add(numbers))
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
