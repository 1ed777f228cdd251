from .loader import load_workload

__all__ = ["load_workload"]
