# ruhungry/ui/console_style.py
def bold(text: str) -> str:
    return f"\033[1m{text}\033[0m"


def ok(text: str) -> str:
    return f"\033[92m{text}\033[0m"


def fail(text: str) -> str:
    return f"\033[91m{text}\033[0m"


def outcome(text: str, succeeded: bool) -> str:
    """Green when the operation went through, red otherwise."""
    return ok(text) if succeeded else fail(text)
