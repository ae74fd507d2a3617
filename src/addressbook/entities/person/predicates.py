"""Search predicates used by the find command to filter the person list."""

from collections.abc import Callable, Iterable, Sequence

from .entity import Person


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """Return True if ``sentence`` contains ``word`` as a whole word.

    Words are separated by whitespace and compared case-insensitively, so
    ``contains_word_ignore_case("ABc def", "abc")`` is True but
    ``contains_word_ignore_case("ABc def", "AB")`` is False.

    Raises:
        ValueError: If ``word`` is empty or contains whitespace.
    """
    prepared = word.strip()
    if not prepared:
        raise ValueError("Word parameter cannot be empty")
    if len(prepared.split()) != 1:
        raise ValueError("Word parameter should be a single word")

    return any(candidate.lower() == prepared.lower() for candidate in sentence.split())


class _KeywordsPredicate:
    """Person predicate built from a list of keywords.

    Two predicates of the same class are equal when their keyword lists are
    equal, which lets commands built from the same input compare equal.
    """

    def __init__(self, keywords: Sequence[str]) -> None:
        self.keywords = list(keywords)

    def __call__(self, person: Person) -> bool:
        return any(
            contains_word_ignore_case(sentence, keyword)
            for keyword in self.keywords
            for sentence in self.sentences(person)
        )

    def sentences(self, person: Person) -> Iterable[str]:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        return type(other) is type(self) and other.keywords == self.keywords

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self.keywords)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.keywords!r})"


class NameContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches persons whose name has a word equal to any keyword."""

    def sentences(self, person: Person) -> Iterable[str]:
        return (person.name.value,)


class ModuleCodesContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches persons taking any of the given module codes.

    Keywords are compared against the bracketed rendering of each code, so
    they must already be wrapped, e.g. ``[CS2030S]``.
    """

    def sentences(self, person: Person) -> Iterable[str]:
        return (str(code) for code in person.module_codes)


class TagsContainsKeywordsPredicate(_KeywordsPredicate):
    """Matches persons carrying any of the given tags, e.g. ``[friends]``."""

    def sentences(self, person: Person) -> Iterable[str]:
        return (str(tag) for tag in person.tags)


PersonPredicate = Callable[[Person], bool]


def show_all_persons(person: Person) -> bool:
    return True
