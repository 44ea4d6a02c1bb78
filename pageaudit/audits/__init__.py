# coding=utf-8

from .charset import *

__all__ = charset.__all__
