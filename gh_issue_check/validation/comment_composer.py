"""Success comment composition."""

CELEBRATION_SUFFIX = "🎉"


class CommentComposer:
    """Formats the comment posted when a pull request references issues."""

    def __init__(self, suffix: str = CELEBRATION_SUFFIX) -> None:
        self.suffix = suffix

    def compose(self, references: list[str]) -> str:
        """Build the success message for a non-empty reference set.

        Raises:
            ValueError: If references is empty
        """
        if not references:
            raise ValueError("Cannot compose a comment without issue references")

        if len(references) == 1:
            return f"This pull request references issue {references[0]}. {self.suffix}"

        joined = ", ".join(references)
        return f"This pull request references issues {joined}. {self.suffix}"
