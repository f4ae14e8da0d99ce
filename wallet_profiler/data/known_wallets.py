"""Known Solana wallets: exchanges, DEX programs and notable whales."""

from wallet_profiler.models.wallet_data import EntityCategory, KnownEntity


EXCHANGES = {}

DEXES = {
    "9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin": KnownEntity(
        address="9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin",
        display_name="Serum/OpenBook DEX",
        category=EntityCategory.DEX,
        sub_label="Serum"
    ),
    "675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8": KnownEntity(
        address="675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8",
        display_name="Raydium AMM",
        category=EntityCategory.DEX,
        sub_label="Raydium"
    ),
    "8JUjWjAyXTMB4ZXcV7nk3p6Gg1fWAAoSck7xekuyADKL": KnownEntity(
        address="8JUjWjAyXTMB4ZXcV7nk3p6Gg1fWAAoSck7xekuyADKL",
        display_name="Orca Swap Program",
        category=EntityCategory.DEX,
        sub_label="Orca"
    ),
    "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4": KnownEntity(
        address="JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4",
        display_name="Jupiter Aggregator",
        category=EntityCategory.DEX,
        sub_label="Jupiter"
    ),
}

_WHALE_ROWS = [
    # Historical whales
    ("vines1vzrYbzLMRdu58ou5XTby4qAqVRLmqo36NKPTg", "Alameda Research (Historical)",
     "Former trading firm associated with FTX"),
    ("2bnZ1kQLVnCLKt5VXnRY34BjL3mTEC75iHJPvLxzrAjt", "Jump Crypto",
     "Major crypto trading firm"),
    ("3FZbgi6VKQE8naSYf9JBkZ4zJCNbvyXJREEBF9gSw1jh", "Three Arrows Capital (Historical)",
     "Former hedge fund"),
    ("HN8gas72ioGsHRQ2xVWH6XKXufjzAUYJMXmAdx6GFhYT", "Solana Foundation",
     "Solana Foundation treasury"),

    # Active whale wallets
    ("MJKqp326RZCHnAAbew9MDdui3iCKWco7fsK9sVuZTX2", "Active Whale 1",
     "Large SOL accumulator with recent activity"),
    ("52C9T2T7JRojtxumYnYZhyUmrN7kqzvCLc4Ksvjk7TxD", "Active Whale 2",
     "Significant SOL transfers from exchanges"),
    ("8BseXT9EtoEhBTKFFYkwTnjKSUZwhtmdKY2Jrj8j45Rt", "Active Whale 3",
     "Recent large staking activity"),
    ("GitYucwpNcg6Dx1Y15UQ9TQn8LZMX1uuqQNn8rXxEWNC", "Active Whale 4",
     "High-frequency trading with large volumes"),
    ("9QgXqrgdbVU8KcpfskqJpAXKzbaYQJecgMAruSWoXDkM", "Active Whale 5",
     "Recent large withdrawals from Binance"),
    ("2W1VbazcNPxyMYAVebPac1zk1cvPXkujnPEby9JnC64Z", "Active Whale 6",
     "Consistent accumulation pattern"),
    ("6o5v1HC7WhBnLfRHp8mQTtCP2khdXXjhuyGyYEoy2Suy", "Active Whale 7",
     "Active in DeFi protocols with large positions"),
    ("2Em76UkVmchjPd4F56RU7WVsFUtaryzzZHsHja8PWxBd", "Active Whale 8",
     "Recently reactivated after dormancy"),
]

WHALES = {
    address: KnownEntity(
        address=address,
        display_name=name,
        category=EntityCategory.WHALE,
        sub_label=notes
    )
    for address, name, notes in _WHALE_ROWS
}

KNOWN_WALLETS = {
    **EXCHANGES,
    **DEXES,
    **WHALES
}
