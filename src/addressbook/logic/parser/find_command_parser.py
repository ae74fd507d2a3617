"""Parser for the find command."""

from src.addressbook.core.exceptions import ParseError
from src.addressbook.entities.person import (
    ModuleCodesContainsKeywordsPredicate,
    NameContainsKeywordsPredicate,
    TagsContainsKeywordsPredicate,
)
from src.addressbook.logic.commands import FindCommand
from src.addressbook.logic.messages import invalid_format

from .argument_tokenizer import tokenize
from .cli_syntax import PREFIX_MODULE_CODE, PREFIX_NAME, PREFIX_TAG
from .parser_util import split_keywords


class FindCommandParser:
    """Builds a FindCommand from exactly one of ``n/``, ``m/`` or ``t/``."""

    def parse(self, args: str) -> FindCommand:
        """Parse the arguments of a find command.

        Raises:
            ParseError: If no search prefix, more than one, or an empty
                keyword list is given.
        """
        multimap = tokenize(args, PREFIX_NAME, PREFIX_MODULE_CODE, PREFIX_TAG)
        has_name = multimap.is_present(PREFIX_NAME)
        has_module = multimap.is_present(PREFIX_MODULE_CODE)
        has_tag = multimap.is_present(PREFIX_TAG)

        # Name excludes both others; module and tag exclude each other.
        if (has_module or has_tag) if has_name else (has_module and has_tag):
            raise ParseError(invalid_format(FindCommand.MESSAGE_SINGLE_PREFIX_SEARCH))

        if has_name:
            keywords = self._keywords(multimap.get_value(PREFIX_NAME))
            return FindCommand(NameContainsKeywordsPredicate(keywords))

        if has_module:
            keywords = self._keywords(multimap.get_value(PREFIX_MODULE_CODE))
            return FindCommand(ModuleCodesContainsKeywordsPredicate(_bracketed(keywords)))

        if has_tag:
            keywords = self._keywords(multimap.get_value(PREFIX_TAG))
            return FindCommand(TagsContainsKeywordsPredicate(_bracketed(keywords)))

        raise ParseError(invalid_format(FindCommand.MESSAGE_USAGE))

    @staticmethod
    def _keywords(raw: str | None) -> list[str]:
        keywords = split_keywords(raw or "")
        if not keywords:
            raise ParseError(invalid_format(FindCommand.MESSAGE_USAGE))
        return keywords


def _bracketed(keywords: list[str]) -> list[str]:
    # Module codes and tags render as "[value]"; keywords are matched against that form.
    return [f"[{keyword}]" for keyword in keywords]
