"""JSON exporter for resolved property documentation."""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from modelprops.config import MarshalingProfile
from modelprops.properties.model_property import BeanModelProperty
from modelprops.schema.models import ResolvedType


class JsonExporter:
    """Export resolved model properties to JSON."""

    def build_document(
        self,
        resolved_type: ResolvedType,
        serialization: Optional[List[BeanModelProperty]] = None,
        deserialization: Optional[List[BeanModelProperty]] = None,
        profile: Optional[MarshalingProfile] = None,
    ) -> Dict[str, Any]:
        """Build the document written by export()."""
        data: Dict[str, Any] = {
            "metadata": {
                "created_at": datetime.now().isoformat(),
                "type": resolved_type.name,
                "qualified_type": resolved_type.qualified_name,
                "profile": profile.to_dict() if profile else None,
            },
        }
        if serialization is not None:
            data["serialization"] = [p.to_dict() for p in serialization]
        if deserialization is not None:
            data["deserialization"] = [p.to_dict() for p in deserialization]
        return data

    def export(
        self,
        output_file: Path,
        resolved_type: ResolvedType,
        serialization: Optional[List[BeanModelProperty]] = None,
        deserialization: Optional[List[BeanModelProperty]] = None,
        profile: Optional[MarshalingProfile] = None,
    ) -> None:
        """Export to JSON file."""
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        data = self.build_document(resolved_type, serialization, deserialization, profile)

        with open(output_file, "w") as f:
            json.dump(data, f, indent=2, default=str)
