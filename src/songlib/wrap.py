"""Line wrapping for parallel block tracks.

A *track* is a list of stanzas, a stanza is a list of lines.  Several tracks
(main text, spoiler text, ...) describe the same slides, so they always have
the same number of stanzas.  :func:`wrap_blocks` splits every stanza of the
first track that is longer than the line limit and moves the matching lines
of all other tracks along with it.

Example with ``maximum_lines=3``::

    main:      [["a", "b", "c", "d"]]        →  [["a", "b"], ["c", "d"]]
    secondary: [["1", "2", "3"]]             →  [["1", "2"], ["3"]]
"""

import copy
import logging

from .exceptions import TrackMismatchError

logger = logging.getLogger(__name__)

Stanza = list[str]
Track = list[Stanza]


def wrap_blocks(
    tracks: list[Track], maximum_lines: int, preserve_boundaries: bool = True
) -> list[Track]:
    """Return a copy of *tracks* where no stanza of ``tracks[0]`` exceeds *maximum_lines*.

    Overflowing stanzas are split roughly in half, never leaving more than
    ``maximum_lines - 1`` lines in the first half (at least one line is always
    kept).  The lines past the split point move, in every track, into a new
    stanza inserted right after the split one.  With *preserve_boundaries*
    false they are prepended to the following stanza instead, if there is one.

    Only the first track is length-capped; the others just follow its
    boundaries.  The total number of lines per track never changes.

    Raises :class:`~songlib.exceptions.TrackMismatchError` if the tracks do not
    all have the same number of stanzas.
    """
    if maximum_lines < 1:
        raise ValueError(f"maximum_lines must be at least 1, got {maximum_lines}")
    if not tracks:
        return []

    lengths = [len(track) for track in tracks]
    if len(set(lengths)) != 1:
        raise TrackMismatchError(lengths)

    wrapped = copy.deepcopy(tracks)
    primary = wrapped[0]

    i = 0
    while i < len(primary):
        size = len(primary[i])
        if size > maximum_lines:
            split = max(1, min(maximum_lines - 1, size // 2))
            merge = not preserve_boundaries and i + 1 < len(primary)
            logger.debug(
                "Splitting stanza %d (%d lines) at line %d%s",
                i,
                size,
                split,
                " into next stanza" if merge else "",
            )
            for track in wrapped:
                overflow = track[i][split:]
                del track[i][split:]
                if merge:
                    track[i + 1][:0] = overflow
                else:
                    track.insert(i + 1, overflow)
        i += 1

    return wrapped
