from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractorConfig:
    """Settings for one extraction run.

    Attributes:
        file_kind: Key of the token-files mapping that holds the CSS sources.
        token_marker: Doc-comment tag that opens a token group.
        presenter_tag: Doc-comment tag naming the group's presenter.
    """

    file_kind: str = "css"
    token_marker: str = "tokens"
    presenter_tag: str = "presenter"

    @property
    def marker(self) -> str:
        """The literal text that flags a comment as a token group marker."""
        return f"@{self.token_marker}"
