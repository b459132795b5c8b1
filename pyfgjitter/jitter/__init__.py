from pyfgjitter.jitter.api import add_jitter  # noqa
from pyfgjitter.jitter.api import JitterSpec  # noqa
from pyfgjitter.jitter.api import NO_JITTER  # noqa
from pyfgjitter.jitter.api import RandomSource  # noqa
