
from ._base import FragmentRenderer
