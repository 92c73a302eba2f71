# bakeryops/ui/console_style.py
ANSI_STYLES = {
    "bold": "\033[1m",
    "cyan": "\033[96m",
    "green": "\033[92m",
    "red": "\033[91m",
    "yellow": "\033[93m",
}
ANSI_RESET = "\033[0m"


def styled(text: str, style: str) -> str:
    return f"{ANSI_STYLES[style]}{text}{ANSI_RESET}"


def signed(text: str, amount: float) -> str:
    """Vert pour un montant positif ou nul, rouge sinon (bénéfice/perte)."""
    return styled(text, "green" if amount >= 0 else "red")
