"""Constants for restriction checks."""

MESSAGE_CIRCULATE = "Yes. You can drive your car."
MESSAGE_RESTRICTED = "Nope. You better call an Uber or take the bus."
MESSAGE_INVALID_PLATE = "Please enter a valid license plate."
MESSAGE_EMPTY_FIELD = "Please fill all the fields."
MESSAGE_INVALID_DATE = "Please, enter a valid date."
MESSAGE_UNEXPECTED = "Please check all the fields are filled."

UNEXPECTED_ERROR_CODE = "unexpected_error"

# Letter and digit group sizes. New plates may gain a character in either group.
MIN_PLATE_WORD_CHARS = 3
MAX_PLATE_WORD_CHARS = 3
MIN_PLATE_DIGIT_CHARS = 3
MAX_PLATE_DIGIT_CHARS = 4

MIN_COMPACT_PLATE_CHARS = 6
MAX_COMPACT_PLATE_CHARS = 9

PLATE_SEPARATOR = "-"
DIGIT_PAD_CHAR = "0"
WORD_PAD_CHAR = " "

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

RESTRICTIONS_FILENAME = "restrictions.json"
SCHEMA_FILENAME = "restrictions.schema.json"
