"""工具模块"""
from .tabulate import tabulate, sample_range

__all__ = ['tabulate', 'sample_range']
