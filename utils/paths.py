import os
from typing import Optional

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


def resolve_data_file(filename: str) -> Optional[str]:
    """Find `data/<filename>` whether run from the project root, a subfolder,
    or the Streamlit Cloud checkout (/mount/src/<repo>).

    Returns the first existing path or None.
    """
    cwd = os.getcwd()
    candidates = [
        os.path.join(PROJECT_ROOT, 'data', filename),
        os.path.join(cwd, 'data', filename),
        os.path.join(os.path.dirname(cwd), 'data', filename),
    ]
    for p in candidates:
        if os.path.exists(p):
            return p
    return None
