import json
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "data"


def load_json(path):
    """
    Purpose:  Low-level helper that reads and parses a single JSON fixture file.

    - No error handling inside: a missing or malformed fixture should fail the
      session loudly instead of handing tests a half-loaded dataset.

    Returns: the deserialized Python object (usually dict or list)

    Raises: FileNotFoundError, PermissionError, JSONDecodeError, etc.
    """
    with open(path, "r", encoding="utf-8") as file:
        return json.load(file)


def load_all_data(data_dir=DATA_DIR):
    """
    Purpose:  Loads every static fixture file in parallel and returns them as a
              tuple in a fixed order (products, carts, users, jsonplaceholder_user).

    - future_map maps each future back to its key, so completion order does not
      matter and the returned tuple is deterministic.
    - Paths resolve against the repository's data/ directory, not the cwd, so
      pytest can be started from anywhere.

    Raises: FileNotFoundError, JSONDecodeError, etc. if any file is missing or malformed
    """
    data_dir = Path(data_dir)
    paths = {
        "products": data_dir / "products.json",
        "carts": data_dir / "carts.json",
        "users": data_dir / "users.json",
        "jsonplaceholder_user": data_dir / "jsonplaceholder_user.json",
    }
    results = {}
    with ThreadPoolExecutor(max_workers=len(paths)) as executor:
        future_map = {executor.submit(load_json, p): key for key, p in paths.items()}
        for fut in as_completed(future_map):
            key = future_map[fut]
            results[key] = fut.result()  # raises if file missing / invalid JSON
    return (
        results["products"],
        results["carts"],
        results["users"],
        results["jsonplaceholder_user"],
    )
