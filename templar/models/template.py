"""Template registry models."""
from dataclasses import dataclass


@dataclass(frozen=True)
class TemplateRef:
    """A registered template repository."""
    name: str    # web-vue
    url: str     # git@github.com:themusecatcher/web-vue.git

    def __str__(self) -> str:
        return self.name
