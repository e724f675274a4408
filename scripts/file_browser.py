"""Interactive file browser against a GCS bucket through the storage adapter.

Usage:
    python -m scripts.file_browser [path/to/config.json]
config.json holds bucket and, optionally, key, projectId and
uniformBucketLevelAccess. Defaults to config.json in the working directory.
"""

import asyncio
import sys
from pathlib import Path

from gstore import Asset, GStore, GStoreException, ReadOptions
from gstore.core.config import load_host_config
from gstore.shared.logging import setup_logging

MENU = """
=== GCS File Browser ===
1. Upload a file
2. Download a file
3. Check if file exists
4. Exit
========================
"""

_CONFIG_KEYS = ("bucket", "key", "projectId", "uniformBucketLevelAccess")


def load_config(path: Path) -> dict:
    """Read config.json; exit with status 1 if it is missing or invalid."""
    try:
        raw = load_host_config(path)
    except GStoreException as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        print("Create config.json with your GCS bucket and key path.", file=sys.stderr)
        sys.exit(1)
    return {k: raw[k] for k in _CONFIG_KEYS if k in raw}


async def prompt(question: str) -> str:
    answer = await asyncio.to_thread(input, question)
    return answer.strip()


async def upload_file(store: GStore, local_path: str) -> str:
    absolute = Path(local_path).resolve()
    if not absolute.exists():
        raise FileNotFoundError(f"File not found: {absolute}")
    asset = Asset(
        path=str(absolute),
        name=absolute.name,
        type="application/octet-stream",
    )
    return await store.save(asset)


async def download_file(store: GStore, remote_path: str, save_path: str) -> int:
    data = await store.read(ReadOptions(path=remote_path))
    Path(save_path).write_bytes(data)
    return len(data)


async def run(store: GStore) -> None:
    """Menu loop; a failed action is reported and the loop continues."""
    while True:
        print(MENU)
        choice = await prompt("Select an option (1-4): ")

        if choice == "1":
            local_path = await prompt("Enter local file path to upload: ")
            if not local_path:
                print("No path provided.")
                continue
            try:
                print("Uploading...")
                url = await upload_file(store, local_path)
                print(f"Upload successful! URL: {url}")
            except Exception as exc:
                print(f"Upload failed: {exc}", file=sys.stderr)
        elif choice == "2":
            remote_path = await prompt("Enter remote file path to download: ")
            if not remote_path:
                print("No path provided.")
                continue
            save_path = await prompt("Enter local path to save file: ")
            if not save_path:
                print("No save path provided.")
                continue
            try:
                print("Downloading...")
                size = await download_file(store, remote_path, save_path)
                print(f"Download successful! Saved {size} bytes to: {save_path}")
            except Exception as exc:
                print(f"Download failed: {exc}", file=sys.stderr)
        elif choice == "3":
            check_path = await prompt("Enter remote file path to check: ")
            if not check_path:
                print("No path provided.")
                continue
            try:
                found = await store.exists(check_path)
                print(f"File exists: {found}")
            except Exception as exc:
                print(f"Check failed: {exc}", file=sys.stderr)
        elif choice == "4":
            print("Goodbye!")
            return
        else:
            print("Invalid option. Please select 1-4.")


async def main() -> None:
    setup_logging()
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("config.json")
    print("Loading configuration...")
    config = load_config(config_path)
    print(f"Bucket: {config.get('bucket')}")

    print("Initializing storage adapter...")
    store = GStore(config)
    print("Storage adapter initialized.")
    await run(store)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except GStoreException as exc:
        print(f"Fatal error: {exc.message}", file=sys.stderr)
        sys.exit(1)
