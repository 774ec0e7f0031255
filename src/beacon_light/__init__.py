"""Trust-verification primitives for Ethereum beacon-chain light clients."""
