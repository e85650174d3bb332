"""Regular-expression substitutions applied repeatedly to text."""

import re
from dataclasses import dataclass, field

SUB_TIMESTAMP = r"\d?\d:\d?\d:\d?\d(?:\.?\d{1,9})?"
SUB_DURATION = r"\d+(?:\.?\d+)?(?:ns|us|µs|ms|s|m|h)"


@dataclass
class Substitutions:
    """An ordered list of compiled patterns and their replacements."""

    _rules: list = field(default_factory=list)

    def add(self, expr, replacement):
        """Compile expr and append it with its replacement; raises re.error."""
        self._rules.append((re.compile(expr), replacement))

    def apply(self, text):
        """Apply every rule in order, repeating until the text stops changing."""
        before = None
        while before != text:
            before = text
            for pattern, replacement in self._rules:
                text = pattern.sub(replacement, text)
        return text

    def __len__(self):
        return len(self._rules)