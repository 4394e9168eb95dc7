# gh_label_state/core/version.py
import importlib.metadata

try:
    __version__ = importlib.metadata.version("gh-label-state")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # fallback version
