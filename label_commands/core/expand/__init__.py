"""Label expansion: flatten label -> projects mappings into one command per pair.

Output order follows the input exactly; repeats are kept so the dedupe pass
owns all duplicate handling.
"""
