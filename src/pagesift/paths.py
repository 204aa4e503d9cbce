"""Path canonicalization shared by the classifier, extractor, and matcher."""


def normalize(path: object) -> str:
    """Return *path* with ``/`` separators and lowercased.

    Idempotent.  ``None``, empty, and non-string input yield ``""``.
    """
    if not path or not isinstance(path, str):
        return ""
    return path.replace("\\", "/").lower()
