from .liquid import *
