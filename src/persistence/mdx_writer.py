# src/persistence/mdx_writer.py
from pathlib import Path


def resolve_output_path(output_dir: Path, relative_path: str) -> Path:
    """
    Join a planned relative path onto output_dir.
    Refuses absolute paths and anything escaping output_dir.
    """
    root = output_dir.resolve()
    target = (root / relative_path).resolve()

    if Path(relative_path).is_absolute() or not target.is_relative_to(root):
        raise ValueError(f"Refusing to write outside {root}: {relative_path}")

    return target


def write_documents(
    output_dir: Path,
    files: dict[str, str],
    dry_run: bool = False,
) -> list[Path]:
    """
    Persist {relative path: MDX text} under output_dir (UTF-8).
    Creates parent directories as needed. Returns the target paths.
    """
    written = []

    for relative_path, content in files.items():
        target = resolve_output_path(output_dir, relative_path)

        if dry_run:
            print(f"📝 [DRY RUN] {relative_path} ({len(content)} chars)")
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            print(f"✅ Wrote: {relative_path}")

        written.append(target)

    return written
