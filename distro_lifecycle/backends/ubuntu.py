# Release lifecycle queries for Debian and Ubuntu.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 19, 2026
# URL: https://distro-lifecycle.readthedocs.io

"""
Release lifecycle queries specific to Ubuntu.

Ubuntu publishes a release every six months, every fourth of which is a long
term support release (recognizable by the ``LTS`` suffix of its version). The
7th CSV column contains the EOL date of server support for LTS releases whose
desktop and server support periods differed, the 8th column contains the end
of Expanded Security Maintenance (ESM).

The generic queries implemented by :class:`~distro_lifecycle.DistroInfo`
already cover Ubuntu's needs, so this backend only provides configuration.
"""

# Standard library modules.
import os

# Modules included in our package.
from distro_lifecycle import DistroInfo
from distro_lifecycle.releases import DISTRO_INFO_DIRECTORY

UBUNTU_CSV_FILE = os.path.join(DISTRO_INFO_DIRECTORY, 'ubuntu.csv')
"""The pathname of the CSV file with Ubuntu release metadata (a string)."""


class UbuntuDistroInfo(DistroInfo):

    """Queries on Ubuntu release metadata."""

    distro_name = 'Ubuntu'
    csv_file = UBUNTU_CSV_FILE
    version_required = True


DISTRO_INFO_CLASS = UbuntuDistroInfo
"""The :class:`~distro_lifecycle.DistroInfo` subclass implemented by this backend."""
