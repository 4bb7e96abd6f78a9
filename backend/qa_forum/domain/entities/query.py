"""Domain entities for question listing: request parameters to a query predicate."""

from dataclasses import dataclass, field

# Range of the stored upvote counter (signed 32-bit).
MIN_VOTE_BOUND = -(2**31)
MAX_VOTE_BOUND = 2**31 - 1


def _parse_tags(raw: str | None) -> list[str]:
    if not raw:
        return []
    tags: list[str] = []
    for item in raw.split(","):
        label = item.strip()
        if label and label not in tags:
            tags.append(label)
    return tags


def _parse_bound(raw: str | int | None) -> int | None:
    """Parse a vote bound; anything non-numeric counts as absent.

    Numeric bounds are clamped to the range an upvote count can hold, which
    leaves the set of matching questions unchanged.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            return None
    return max(MIN_VOTE_BOUND, min(MAX_VOTE_BOUND, value))


@dataclass(frozen=True)
class QuestionFilter:
    """Conjunction of optional conditions over the question collection.

    Each attribute is one condition; an empty/``None`` attribute contributes
    nothing. ``search`` is the only disjunction (title OR body). Because the
    conditions are plain fields, the order in which request parameters
    arrive cannot affect the resulting predicate.
    """

    tags: tuple[str, ...] = field(default_factory=tuple)
    status: str | None = None
    search: str | None = None
    min_votes: int | None = None
    max_votes: int | None = None

    @classmethod
    def from_params(
        cls,
        tags: str | None = None,
        status: str | None = None,
        search: str | None = None,
        min_votes: str | int | None = None,
        max_votes: str | int | None = None,
    ) -> "QuestionFilter":
        """Build a filter from raw query-string values."""
        return cls(
            tags=tuple(_parse_tags(tags)),
            status=status or None,
            search=search or None,
            min_votes=_parse_bound(min_votes),
            max_votes=_parse_bound(max_votes),
        )
