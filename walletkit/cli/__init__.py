"""walletkit command-line interface."""
