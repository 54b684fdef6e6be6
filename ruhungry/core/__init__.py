"""
Engine of the restaurant: transaction journal, order fulfilment,
profit-gated supply decisions and the `Restaurant` facade tying them
together.
"""
