"""Provide insights about Python objects."""

import inspect
from typing import Any


def get_qualname(obj: Any) -> str:
    """Get the qualified name of the given object.

    Will return the name of the object and the
    name of the module and class it belongs to.

    For functions or methods, this will return
    something like `module.class.method` or
    `module.function`. Used to describe
    the predicates and key functions of joins.

    >>> class KeyExtractor:
    ...   def first(self, row):
    ...     return row[0]
    >>> get_qualname(KeyExtractor().first)
    'gridtable.utils.inspect.KeyExtractor.first'
    >>> import operator
    >>> get_qualname(operator.itemgetter(0))
    'operator.itemgetter'
    """
    module = inspect.getmodule(obj)
    module_name = module.__name__ if module is not None else "__main__"
    if inspect.ismethod(obj) or inspect.isfunction(obj):
        if getattr(obj, "__self__", None) is not None:
            class_name = obj.__self__.__class__.__name__
            return f"{module_name}.{class_name}.{obj.__name__}"
        return f"{module_name}.{obj.__qualname__}"
    elif inspect.isbuiltin(obj):
        return f"{obj.__module__ or module_name}.{obj.__qualname__}"
    elif inspect.isclass(obj):
        return f"{module_name}.{obj.__name__}"
    elif inspect.ismodule(obj):
        return obj.__name__
    elif isinstance(obj, object):
        return f"{type(obj).__module__}.{type(obj).__qualname__}"
    raise ValueError(f"Unable to detect path for object of type {type(obj)}")
