# ZooSim_V1/console_style.py
RESET = "\033[0m"


def _wrap(code: str, text: str) -> str:
    return f"\033[{code}m{text}{RESET}"


def bold(text: str) -> str:
    return _wrap("1", text)


def cyan(text: str) -> str:
    return _wrap("96", text)


def green(text: str) -> str:
    return _wrap("92", text)


def red(text: str) -> str:
    return _wrap("91", text)


def yellow(text: str) -> str:
    return _wrap("93", text)


def signed_money(amount: float) -> str:
    """Green when the balance is positive, red when the zoo is in debt."""
    text = f"${amount:,.2f}"
    return green(text) if amount >= 0 else red(text)
