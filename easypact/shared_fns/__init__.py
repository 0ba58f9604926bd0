from .shared_fns import *
