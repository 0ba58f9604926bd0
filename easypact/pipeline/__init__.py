from .pipeline import *
