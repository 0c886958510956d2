# Release lifecycle queries for Debian and Ubuntu.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 19, 2026
# URL: https://distro-lifecycle.readthedocs.io

"""Distribution specific :class:`~distro_lifecycle.DistroInfo` subclasses."""
