from .library import *
