"""Intent classification.

The intent layer turns the raw body of an inbound SMS into exactly one strict `Intent` object, which
the webhook handler then maps onto a single ledger call and a reply.
"""
