"""Tests for success comment composition."""

import pytest

from gh_issue_check.validation.comment_composer import (
    CELEBRATION_SUFFIX,
    CommentComposer,
)


@pytest.fixture
def composer() -> CommentComposer:
    return CommentComposer()


def test_compose_singular(composer: CommentComposer) -> None:
    """A single reference uses the singular form."""
    comment = composer.compose(["#12"])
    assert "issue #12" in comment
    assert "issues" not in comment
    assert comment.endswith(CELEBRATION_SUFFIX)


def test_compose_plural(composer: CommentComposer) -> None:
    """Several references are comma-joined in input order."""
    comment = composer.compose(["#12", "#7"])
    assert "issues #12, #7" in comment
    assert comment.endswith(CELEBRATION_SUFFIX)


def test_compose_custom_suffix() -> None:
    """The suffix can be replaced."""
    assert CommentComposer(suffix="!").compose(["#1"]).endswith("!")


def test_compose_empty_is_error(composer: CommentComposer) -> None:
    """An empty reference set is a programming error."""
    with pytest.raises(ValueError, match="without issue references"):
        composer.compose([])
