from importlib import import_module

modules = [
    'cross_reactivity',
]

for m in modules:
    import_module(f'.{m}', __name__)

__all__ = modules
