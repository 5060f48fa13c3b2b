"""JSON output formatter for inspection results."""
import json
from datetime import datetime, timezone
from typing import Any

from pkgkeeper import __version__
from pkgkeeper.models.reference import InspectionResult


class InspectJsonFormatter:
    """Format inspection results as JSON output.

    Provides structured JSON for programmatic processing and CI/CD
    integration.
    """

    def format_inspection_result(self, result: InspectionResult) -> str:
        """Format inspection result as JSON string.

        Args:
            result: The inspection result to format.

        Returns:
            JSON string representation of the result.
        """
        return json.dumps(self._build_output(result), indent=2)

    def _build_output(self, result: InspectionResult) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "inspect_metadata": {
                "generated_at": timestamp,
                "tool_version": __version__,
                "base_directory": result.base_directory,
            },
            "summary": {
                "files_scanned": result.files_scanned,
                "total_references": result.total_references,
                "filtered_count": len(result.filtered_names),
                "filtered_names": result.filtered_names,
            },
            "references": [
                {
                    "name": reference.name,
                    "version": reference.version,
                    "file": reference.path.relative_path,
                    "type": reference.path.package_reference_type.value,
                }
                for reference in sorted(
                    result.references,
                    key=lambda r: (r.name.lower(), r.path.relative_path),
                )
            ],
        }
