"""Singleton metaclass shared by the describer services."""


class Singleton(type):
    """Metaclass that hands out one instance per class."""

    _instances: dict = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def drop_instance(cls) -> None:
        """Forget the cached instance so the next call builds a fresh one."""
        Singleton._instances.pop(cls, None)
