"""
duelchess: two-player terminal chess, on one machine or over a TCP stream.

Components:
- referee: game state and rules (python-chess), save/load
- codec: the fixed 4-byte move frame
- render/console: board projections and terminal I/O
- local/peers: the local loop and the host/remote networked loops
- cli: argument parsing and mode dispatch
"""
# Package exports are intentionally minimal; import modules directly as needed.
