"""Parser for the human-readable ``git status`` report.

The report is a sequence of loosely structured blocks: a branch header, an
optional tracking line, and up to three sections (staged, unstaged,
untracked) each introduced by a header and closed by blank lines. This module
walks it one line at a time and tallies what it finds.
"""

import codecs
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from repostat.status._buffer import LineBuffer
from repostat.status._models import ChangeSet, RepositoryStatus, Section

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_BRANCH_PREFIX: Final = "On branch "
_TRACKING_PREFIX: Final = "Your branch"

_SECTION_HEADERS: Final = {
    "Changes to be committed:": Section.STAGED,
    "Changes not staged for commit:": Section.UNSTAGED,
    "Untracked files:": Section.UNTRACKED,
}

_QUOTED: Final = re.compile(r"'([^']*)'")
_AHEAD: Final = re.compile(r"\bahead\b")
_BEHIND: Final = re.compile(r"\bbehind\b")
_DIVERGED: Final = re.compile(r"\bdiverged\b")
_BY_COUNT: Final = re.compile(r"by (\d+)")
_HAVE_COUNT: Final = re.compile(r"have (\d+)")
_AND_COUNT: Final = re.compile(r"and (\d+)")

_NEW_FILE: Final = "new file:"
_MODIFIED: Final = "modified:"
_DELETED: Final = "deleted:"


@dataclass(slots=True)
class _ChangeTally:
    """Mutable counterpart of ChangeSet used while a parse is running."""

    added: int = 0
    deleted: int = 0
    modified: int = 0

    def freeze(self) -> ChangeSet:
        return ChangeSet(added=self.added, deleted=self.deleted, modified=self.modified)


def _first_count(pattern: re.Pattern[str], text: str) -> int | None:
    match = pattern.search(text)
    if match is None:
        return None
    return int(match.group(1))


class StatusParser:
    """Line-oriented state machine over a ``git status`` report.

    A parser lives for exactly one report. Feed it text (or bytes) in arrival
    order with :meth:`feed` / :meth:`feed_bytes`, then call :meth:`finish` once
    the stream has closed to receive the frozen :class:`RepositoryStatus`.

    Section entries are only counted after the first blank line following a
    section header, and a second blank line closes the section. Lines that
    match nothing are ignored.

    Example:
        >>> parser = StatusParser()
        >>> parser.feed("On branch main\\n")
        >>> parser.finish().local_branch_name
        'main'
    """

    __slots__ = (
        "_buffer",
        "_current_section",
        "_decoder",
        "_expect_diverged_commit_line",
        "_finished",
        "_local_branch_name",
        "_local_new_commits",
        "_logger",
        "_pending_section_close",
        "_remote_branch_name",
        "_remote_new_commits",
        "_staged",
        "_tracking_empty_lines",
        "_unstaged",
    )

    def __init__(self, *, logger: "FilteringBoundLogger | None" = None) -> None:
        """Initialize an empty parser.

        Args:
            logger: Optional structured logger for debug events.
        """
        self._logger = logger
        self._buffer = LineBuffer()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._finished = False

        self._current_section: Section | None = None
        self._tracking_empty_lines = False
        self._pending_section_close = False
        self._expect_diverged_commit_line = False

        self._local_branch_name = ""
        self._remote_branch_name = ""
        self._local_new_commits = 0
        self._remote_new_commits = 0
        self._staged = _ChangeTally()
        self._unstaged = _ChangeTally()

    @property
    def current_section(self) -> Section | None:
        """Return the section currently open, if any."""
        return self._current_section

    def feed(self, chunk: str) -> None:
        """Consume a chunk of report text.

        Args:
            chunk: Text in arrival order; need not end on a line boundary.

        Raises:
            RuntimeError: If the parser has already finished.
        """
        self._ensure_open()
        for line in self._buffer.push(chunk):
            self.feed_line(line)

    def feed_bytes(self, chunk: bytes) -> None:
        """Consume a chunk of raw UTF-8 output.

        Multi-byte characters split across chunks are decoded correctly.

        Args:
            chunk: Bytes in arrival order.

        Raises:
            RuntimeError: If the parser has already finished.
        """
        self.feed(self._decoder.decode(chunk))

    def feed_line(self, line: str) -> None:
        """Classify one complete line and update the tallies.

        Args:
            line: A single line without its terminator.

        Raises:
            RuntimeError: If the parser has already finished.
        """
        self._ensure_open()
        text = line.strip()

        if self._tracking_empty_lines and not text:
            self._on_blank_line()
            return

        if text.startswith(_BRANCH_PREFIX):
            self._local_branch_name = text.removeprefix(_BRANCH_PREFIX)
            return

        if text.startswith(_TRACKING_PREFIX):
            self._read_tracking_line(text)
            return

        if self._expect_diverged_commit_line:
            if text:
                self._read_diverged_counts(text)
            return

        section = _SECTION_HEADERS.get(text)
        if section is not None:
            self._open_section(section)
            return

        if self._current_section is not None and self._pending_section_close:
            self._count_entry(self._current_section, text)

    def finish(self) -> RepositoryStatus:
        """Process any buffered tail and return the finished status.

        Returns:
            The accumulated repository status.

        Raises:
            RuntimeError: If the parser has already finished.
        """
        self._ensure_open()
        self.feed(self._decoder.decode(b"", final=True))
        fragment = self._buffer.flush()
        if fragment is not None:
            self.feed_line(fragment)

        self._finished = True
        return RepositoryStatus(
            local_branch_name=self._local_branch_name,
            remote_branch_name=self._remote_branch_name,
            local_new_commits=self._local_new_commits,
            remote_new_commits=self._remote_new_commits,
            staged_changes=self._staged.freeze(),
            unstaged_changes=self._unstaged.freeze(),
        )

    # =========================================================================
    # Line handlers
    # =========================================================================

    def _ensure_open(self) -> None:
        if self._finished:
            msg = "StatusParser already finished; create a new parser per report"
            raise RuntimeError(msg)

    def _on_blank_line(self) -> None:
        if not self._pending_section_close:
            # First blank after a header separates the hint text from entries
            self._pending_section_close = True
            return

        if self._logger is not None:
            self._logger.debug("section_closed", section=self._current_section)
        self._current_section = None
        self._tracking_empty_lines = False
        self._pending_section_close = False

    def _open_section(self, section: Section) -> None:
        if self._logger is not None:
            self._logger.debug("section_opened", section=section)
        self._current_section = section
        self._tracking_empty_lines = True
        self._pending_section_close = False

    def _read_tracking_line(self, text: str) -> None:
        # Classify on the text outside quotes so branch names cannot match
        words = _QUOTED.sub("''", text)

        if _AHEAD.search(words):
            count = _first_count(_BY_COUNT, text)
            if count is not None:
                self._local_new_commits = count
        elif _BEHIND.search(words):
            count = _first_count(_BY_COUNT, text)
            if count is not None:
                self._remote_new_commits = count
        elif _DIVERGED.search(words):
            self._expect_diverged_commit_line = True

        match = _QUOTED.search(text)
        if match is not None:
            self._remote_branch_name = match.group(1)

        if self._logger is not None:
            self._logger.debug(
                "tracking_line",
                remote=self._remote_branch_name,
                local_new_commits=self._local_new_commits,
                remote_new_commits=self._remote_new_commits,
                diverged=self._expect_diverged_commit_line,
            )

    def _read_diverged_counts(self, text: str) -> None:
        local = _first_count(_HAVE_COUNT, text)
        remote = _first_count(_AND_COUNT, text)
        if local is not None:
            self._local_new_commits = local
        if remote is not None:
            self._remote_new_commits = remote
        self._expect_diverged_commit_line = False

    def _count_entry(self, section: Section, text: str) -> None:
        if section is Section.STAGED:
            if _NEW_FILE in text:
                self._staged.added += 1
            elif _MODIFIED in text:
                self._staged.modified += 1
            elif _DELETED in text:
                self._staged.deleted += 1
        elif section is Section.UNSTAGED:
            if _MODIFIED in text:
                self._unstaged.modified += 1
            elif _DELETED in text:
                self._unstaged.deleted += 1
        else:
            # Untracked files count as additions to the unstaged set
            self._unstaged.added += 1


def parse_status_text(
    text: str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> RepositoryStatus:
    """Parse a complete status report held in memory.

    Args:
        text: The full output of ``git status``.
        logger: Optional structured logger for debug events.

    Returns:
        The parsed repository status.
    """
    parser = StatusParser(logger=logger)
    parser.feed(text)
    return parser.finish()
