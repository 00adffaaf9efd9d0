"""
Fuzzy search over the candidate file set.

Each candidate label is matched against the query with an approximate
substring search: the query may appear anywhere in the label with a limited
number of edits (insertions, deletions, substitutions and swaps of adjacent
characters). The cost of a match combines how many edits were needed with
how far from the expected location the match starts:

    cost = edits / len(query) + abs(location - start) / distance

A candidate matches when its best cost is at most ``threshold``.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# Longer queries are cut to this many characters
MAX_PATTERN_LENGTH = 32


@dataclass(frozen=True)
class FuzzyMatch:
    """A candidate that matched a query."""
    path: str
    score: float     # lower is better, 0.0 is an exact hit at the expected location
    position: int    # index in the label where the match starts


class FuzzyIndex:
    """Searchable index over an ordered list of candidate paths."""

    def __init__(self, candidates: Sequence[str], threshold: float = 0.4,
                 distance: int = 100, location: int = 0,
                 case_sensitive: bool = False):
        """
        Build the index.

        Args:
            candidates: Candidate labels in their original order.
            threshold: Highest cost still considered a match (0.0 exact only, 1.0 anything).
            distance: How quickly the cost grows as a match moves away from location.
            location: Index in the label where a match is expected to start.
            case_sensitive: Compare characters without folding case.
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {threshold}")
        if distance < 0:
            raise ValueError(f"distance must not be negative, got {distance}")

        self.threshold = threshold
        self.distance = distance
        self.location = location
        self.case_sensitive = case_sensitive
        self.candidates: Tuple[str, ...] = tuple(candidates)
        self._labels = [self._fold(c) for c in self.candidates]

    def __len__(self) -> int:
        return len(self.candidates)

    def _fold(self, text: str) -> str:
        return text if self.case_sensitive else text.lower()

    def max_edits(self, query: str) -> int:
        """Largest number of edits a match of this query can contain."""
        pattern_len = min(len(query), MAX_PATTERN_LENGTH)
        return int(self.threshold * pattern_len)

    def search(self, query: str) -> List[str]:
        """
        Search the index.

        Args:
            query: Non-empty search text.

        Returns:
            Matching paths, best match first. Equal costs keep candidate order.
        """
        return [match.path for match in self.search_scored(query)]

    def search_scored(self, query: str) -> List[FuzzyMatch]:
        """Search the index and return matches with their costs."""
        if not query:
            raise ValueError("FuzzyIndex cannot search an empty query")

        pattern = self._fold(query)[:MAX_PATTERN_LENGTH]
        masks = pattern_masks(pattern)
        matches = []
        for path, label in zip(self.candidates, self._labels):
            found = self._match(pattern, label, masks)
            if found is None:
                continue
            score, position = found
            matches.append(FuzzyMatch(path, score, position))

        # sorted() is stable, so ties stay in candidate order
        matches = sorted(matches, key=lambda m: m.score)
        logger.debug(f"Query {query!r}: {len(matches)} of {len(self.candidates)} candidates matched")
        return matches

    def _proximity(self, start: int) -> float:
        offset = abs(self.location - start)
        if not self.distance:
            return 0.0 if offset == 0 else 1.0
        return offset / self.distance

    def _match(self, pattern: str, text: str,
               masks: Optional[Dict[str, int]] = None) -> Optional[Tuple[float, int]]:
        """
        Find the cheapest approximate occurrence of pattern in text.

        Returns:
            (cost, start) of the best occurrence, or None if nothing is within threshold.
        """
        m = len(pattern)
        n = len(text)
        budget = self.max_edits(pattern)

        if pattern == text:
            return 0.0, 0
        if fewest_edits(masks or pattern_masks(pattern), m, text) > budget:
            return None

        location = self.location
        # Three rows of the edit table: dist[j] is the fewest edits turning
        # pattern[:i] into a substring of text ending at j, start[j] where it begins
        before_dist = before_start = None
        prev_dist = [0] * (n + 1)
        prev_start = list(range(n + 1))
        prev_min = 0

        for i in range(1, m + 1):
            p = pattern[i - 1]
            q = pattern[i - 2] if i > 1 else None
            dist = [i] + [0] * n
            start = [0] * (n + 1)
            for j in range(1, n + 1):
                t = text[j - 1]
                best = prev_dist[j - 1] + (p != t)
                best_start = prev_start[j - 1]

                d = prev_dist[j] + 1
                if d < best or (d == best and abs(location - prev_start[j]) < abs(location - best_start)):
                    best, best_start = d, prev_start[j]

                d = dist[j - 1] + 1
                if d < best or (d == best and abs(location - start[j - 1]) < abs(location - best_start)):
                    best, best_start = d, start[j - 1]

                if i > 1 and j > 1 and p == text[j - 2] and q == t:
                    d = before_dist[j - 2] + 1
                    s = before_start[j - 2]
                    if d < best or (d == best and abs(location - s) < abs(location - best_start)):
                        best, best_start = d, s

                dist[j] = best
                start[j] = best_start

            # Later rows only grow from here
            row_min = min(dist)
            if row_min > budget and prev_min >= budget:
                return None

            before_dist, before_start = prev_dist, prev_start
            prev_dist, prev_start, prev_min = dist, start, row_min

        best_match = None
        for j in range(n + 1):
            edits = prev_dist[j]
            if edits > budget:
                continue
            cost = edits / m + self._proximity(prev_start[j])
            if cost <= self.threshold and (best_match is None or cost < best_match[0]):
                best_match = (cost, prev_start[j])
        return best_match


def pattern_masks(pattern: str) -> Dict[str, int]:
    """Bit mask of the positions of each character in pattern."""
    masks: Dict[str, int] = {}
    for i, char in enumerate(pattern):
        masks[char] = masks.get(char, 0) | (1 << i)
    return masks


def fewest_edits(masks: Dict[str, int], m: int, text: str) -> int:
    """
    Fewest edits (with adjacent swaps) turning a pattern of length m into
    any substring of text.

    Bit-parallel column scan after Hyyrö (2003), with a free start anywhere
    in text. Gives the same count as the last row of the edit table in
    FuzzyIndex._match without tracking where matches begin.
    """
    full = (1 << m) - 1
    last = 1 << (m - 1)
    vp, vn, d0, pm_prev = full, 0, 0, 0
    edits = best = m
    for char in text:
        pm = masks.get(char, 0)
        swap = (((~d0) & pm) << 1) & pm_prev
        d0 = ((((pm & vp) + vp) ^ vp) | pm | vn | swap) & full
        hp = (vn | ~(d0 | vp)) & full
        hn = d0 & vp
        if hp & last:
            edits += 1
        elif hn & last:
            edits -= 1
        hp = (hp << 1) & full
        hn = (hn << 1) & full
        vp = (hn | ~(d0 | hp)) & full
        vn = hp & d0
        pm_prev = pm
        if edits < best:
            best = edits
    return best


def build(candidates: Sequence[str], threshold: float = 0.4, distance: int = 100) -> FuzzyIndex:
    """Build a fuzzy index over the candidate set."""
    return FuzzyIndex(candidates, threshold=threshold, distance=distance)


def search(index: FuzzyIndex, query: str) -> List[str]:
    """Search a built index. The query must not be empty."""
    return index.search(query)
