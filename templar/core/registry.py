"""Built-in template registry."""
from pathlib import Path
from typing import List, Optional

import yaml

from templar.models.template import TemplateRef


class RegistryError(Exception):
    """Raised when the template registry file is malformed."""


class TemplateRegistry:
    """Loads the templates bundled with Templar."""

    def __init__(self, registry_path: Optional[Path] = None):
        """Initialize template registry.

        Args:
            registry_path: Path to registry file. Defaults to templar/templates/registry.yml
        """
        if registry_path is None:
            # Registry is in templar/core/, templates are in templar/templates/
            registry_path = Path(__file__).parent.parent / "templates" / "registry.yml"
        self.registry_path = registry_path
        self._templates: Optional[List[TemplateRef]] = None

    def list_templates(self) -> List[TemplateRef]:
        """Return all templates in registry order.

        Raises:
            RegistryError: If the registry file is missing or malformed
        """
        if self._templates is None:
            self._templates = self._load()
        return list(self._templates)

    def find_template(self, name: Optional[str]) -> Optional[TemplateRef]:
        """Find a template by its display name."""
        if not name:
            return None
        for template in self.list_templates():
            if template.name == name:
                return template
        return None

    def _load(self) -> List[TemplateRef]:
        if not self.registry_path.exists():
            raise RegistryError(f"Template registry not found at {self.registry_path}")

        with open(self.registry_path) as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict) or not isinstance(data.get('templates'), list):
            raise RegistryError(f"{self.registry_path}: expected a 'templates' list")

        templates = []
        seen = set()
        for index, entry in enumerate(data['templates']):
            if not isinstance(entry, dict):
                raise RegistryError(f"{self.registry_path}: template #{index + 1} is not a mapping")
            name = str(entry.get('name') or '').strip()
            url = str(entry.get('url') or '').strip()
            if not name or not url:
                raise RegistryError(
                    f"{self.registry_path}: template #{index + 1} needs both 'name' and 'url'"
                )
            if name in seen:
                raise RegistryError(f"{self.registry_path}: duplicate template '{name}'")
            seen.add(name)
            templates.append(TemplateRef(name=name, url=url))

        if not templates:
            raise RegistryError(f"{self.registry_path}: no templates defined")

        return templates
