# Author: Lukas Snoek [lukassnoek.github.io]
# Contact: lukassnoek@gmail.com
# License: 3 clause BSD

from . import exceptions
from . import utils
from . import preproc
from . import feature_selection
from . import postproc

__version__ = '0.1.0'

__all__ = ['exceptions', 'utils', 'preproc', 'feature_selection',
           'postproc']
