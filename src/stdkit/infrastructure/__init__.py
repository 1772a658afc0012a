"""Infrastructure layer — filesystem primitives.

Blocking calls live here; async variants offload them to a worker thread.
It must never import from services, commands, or output.
"""
