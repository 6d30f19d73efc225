from .resolver import ModuleResolver, parse_module_path

__all__ = ['ModuleResolver', 'parse_module_path']
