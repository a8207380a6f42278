from .posts_api import *
from .profile_api import *
from .users_api import *
