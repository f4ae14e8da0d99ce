"""Display formatting for addresses and SOL amounts."""

from typing import Optional

from wallet_profiler.models.wallet_data import LAMPORTS_PER_SOL


def format_address(address: Optional[str]) -> str:
    """Truncate the middle of long addresses: ``AbCdEf...uVwXyZ``."""
    if not address:
        return ''
    if len(address) > 12:
        return f"{address[:6]}...{address[-6:]}"
    return address


def format_sol(lamports: int) -> str:
    """Format a lamport amount as SOL with thousands separators."""
    sol = lamports / LAMPORTS_PER_SOL
    text = f"{sol:,.9f}".rstrip('0')
    whole, _, fraction = text.partition('.')
    return f"{whole}.{fraction.ljust(2, '0')}"
