from pathlib import Path


def find_latest_export(keyword):
    """Path of the most recent JSON export matching the keyword."""
    repo_root = Path(__file__).resolve().parents[1]
    candidates = list(repo_root.glob(f"attached_assets/*{keyword}*.json"))
    candidates.extend(repo_root.glob(f"*{keyword}*.json"))

    if not candidates:
        raise FileNotFoundError(f"No JSON file containing '{keyword}' found")

    path = sorted(candidates)[-1]
    print("Using file:", path)
    return path


def load_latest_export_bytes(keyword) -> bytes:
    return find_latest_export(keyword).read_bytes()
