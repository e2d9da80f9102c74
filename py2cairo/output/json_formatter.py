"""
JSON output formatter for translation results.
Generates a structured report with integrity hashes.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Any, Optional

from py2cairo import __version__
from py2cairo.core.models import ContractModel
from py2cairo.utils.hashing import ArtifactHasher


class TranslationJSONFormatter:
    """
    Formats a translation result as structured JSON with integrity hashes.
    """

    SCHEMA_VERSION = "1.0.0"

    def __init__(self, source_file: str, strict: bool = False):
        """
        Args:
            source_file: Path to the Python source file being translated
            strict: Whether the translation ran in strict mode
        """
        self.source_file = source_file
        self.strict = strict
        self.contract: Optional[ContractModel] = None
        self.artifacts: Dict[str, Any] = {}

    def set_result(self,
                   contract: ContractModel,
                   python_source: str,
                   cairo_source: str,
                   cairo_file: Optional[str] = None) -> None:
        source_hash = ArtifactHasher.hash_string(python_source)
        cairo_hash = ArtifactHasher.hash_string(cairo_source)

        self.contract = contract
        self.artifacts = {
            "source_hash": source_hash,
            "source_length": len(python_source),
            "cairo_hash": cairo_hash,
            "combined_hash": ArtifactHasher.compute_combined_hash(source_hash, cairo_hash)
        }
        if cairo_file:
            self.artifacts["cairo_file"] = cairo_file

    def generate(self) -> Dict[str, Any]:
        """
        Generate the complete JSON output structure.

        Returns:
            Dictionary representing the JSON structure
        """
        contract = self.contract or ContractModel()
        views = sum(1 for fn in contract.functions if fn.is_view)

        return {
            "schema_version": self.SCHEMA_VERSION,
            "metadata": {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "source_file": self.source_file,
                "translator_version": f"py2cairo-{__version__}",
                "strict": self.strict
            },
            "summary": {
                "contract": contract.name,
                "storage_fields": len(contract.storage),
                "functions": len(contract.functions),
                "view_functions": views,
                "mutating_functions": len(contract.functions) - views
            },
            "contract": contract.to_dict(),
            "artifacts": self.artifacts
        }

    def save_to_file(self, output_path: str, indent: int = 2) -> None:
        """
        Save JSON to file.

        Args:
            output_path: Path to output JSON file
            indent: Number of spaces for indentation
        """
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.generate(), f, indent=indent)
