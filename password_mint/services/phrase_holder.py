"""
Opt-in, memory-only phrase retention for a single session
Nothing is ever written to disk. Leaving the `with` block, calling forget(),
or turning remembering off clears the phrase.
"""

from typing import Optional

from password_mint.logging_config import log_phrase_forgotten, log_phrase_remembered


class RememberedPhrase:
    """Holds a phrase between derivations only while the user opts in"""

    def __init__(self, enabled: bool = False):
        self._enabled = enabled
        self._phrase: Optional[str] = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def is_held(self) -> bool:
        return self._phrase is not None

    def enable(self):
        self._enabled = True

    def disable(self):
        """Stop remembering; drops any held phrase"""
        self._enabled = False
        self.forget()

    def remember(self, phrase: str) -> bool:
        """Keep `phrase` if remembering is on. Returns whether it was kept."""
        if not self._enabled:
            return False
        if self._phrase is None:
            log_phrase_remembered()
        self._phrase = phrase
        return True

    def get(self) -> Optional[str]:
        return self._phrase if self._enabled else None

    def forget(self):
        if self._phrase is not None:
            self._phrase = None
            log_phrase_forgotten()

    def __enter__(self) -> "RememberedPhrase":
        return self

    def __exit__(self, _exc_type, _exc, _tb):
        self.disable()
        return False

    def __repr__(self) -> str:
        state = "held" if self.is_held else "empty"
        return f"RememberedPhrase(enabled={self._enabled}, {state})"
