"""Lookup-name parsing utilities."""

from .models import PackageIdentifier


def parse_package_identifier(lookup_name: str) -> PackageIdentifier:
    """Parse ``group:artifact[_suffix]`` into a PackageIdentifier.

    The group is split on dots. The artifact id is split on underscores: the
    first piece is the artifact and the second, if any, is the platform
    suffix (e.g. a Scala binary version in ``cats-core_2.13``).

    Raises:
        ValueError: when the group or artifact part is missing.
    """
    token = (lookup_name or "").strip()
    if ":" not in token:
        raise ValueError(f"Invalid package identifier '{lookup_name}'. Expected 'group:artifact'.")
    group_id, artifact_id = token.split(":")[:2]
    group_id = group_id.strip()
    artifact_id = artifact_id.strip()
    if not group_id or not artifact_id:
        raise ValueError(f"Invalid package identifier '{lookup_name}'. Expected 'group:artifact'.")

    artifact_parts = artifact_id.split("_")
    artifact = artifact_parts[0]
    if not artifact:
        raise ValueError(f"Invalid package identifier '{lookup_name}'. Empty artifact name.")
    platform_suffix = artifact_parts[1] if len(artifact_parts) > 1 and artifact_parts[1] else None

    return PackageIdentifier(
        group_segments=tuple(group_id.split(".")),
        artifact=artifact,
        platform_suffix=platform_suffix,
    )
