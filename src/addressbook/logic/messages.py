"""User-facing messages shared by several commands and parsers."""

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)
