# Release lifecycle queries for Debian and Ubuntu.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 19, 2026
# URL: https://distro-lifecycle.readthedocs.io

"""
Release lifecycle queries specific to Debian.

Debian differs from Ubuntu in a couple of ways that matter here:

- The rolling ``sid`` (unstable) and ``experimental`` series don't have a
  version number, so :attr:`DebianDistroInfo.version_required` is disabled.

- The current stable release usually doesn't have an EOL date yet, which is
  why :func:`~DebianDistroInfo.stable_at()` uses its own rules instead of
  :func:`~distro_lifecycle.DistroInfo.latest_at()`.

- The 7th and 8th CSV columns contain the EOL dates of `Debian LTS`_ and
  `Debian ELTS`_ (Extended LTS).

Here are references to some of the material that I've needed to consult while
working on this module:

- `The Debian releases overview <https://www.debian.org/releases/>`_
- `The Debian LTS wiki page <https://wiki.debian.org/LTS>`_

.. _Debian LTS: https://wiki.debian.org/LTS
.. _Debian ELTS: https://wiki.debian.org/LTS/Extended
"""

# Standard library modules.
import logging
import os

# Modules included in our package.
from distro_lifecycle import DistroInfo, coerce_date
from distro_lifecycle.releases import DISTRO_INFO_DIRECTORY

DEBIAN_CSV_FILE = os.path.join(DISTRO_INFO_DIRECTORY, 'debian.csv')
"""The pathname of the CSV file with Debian release metadata (a string)."""

UNSTABLE_SERIES = 'sid'
"""The series of Debian unstable (a string)."""

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


class DebianDistroInfo(DistroInfo):

    """Queries on Debian release metadata."""

    distro_name = 'Debian'
    csv_file = DEBIAN_CSV_FILE
    version_required = False

    def stable_releases_at(self, date=None):
        """
        Get the versioned releases that were published and not yet EOL on the given date.

        Unlike :func:`~distro_lifecycle.DistroInfo.all_supported_at()` this
        includes releases without an EOL date, because Debian doesn't announce
        an EOL date for the current stable release.
        """
        date = coerce_date(date)
        return [
            r for r in self.releases
            if r.version and r.is_released_at(date) and (r.eol_date is None or date <= r.eol_date)
        ]

    def stable_at(self, date=None):
        """Get the current stable release (a :class:`~distro_lifecycle.releases.Release` object or :data:`None`)."""
        candidates = self.stable_releases_at(date)
        return candidates[-1] if candidates else None

    def oldstable_at(self, date=None):
        """
        Get the current oldstable release.

        :param date: A :class:`~datetime.date` object (defaults to today).
        :returns: A :class:`~distro_lifecycle.releases.Release` object or :data:`None`.

        This is the second to last versioned release that had been published
        on the given date. EOL dates are ignored, so oldstable keeps its role
        after its regular support ends.
        """
        date = coerce_date(date)
        candidates = [r for r in self.releases if r.version and r.is_released_at(date)]
        return candidates[-2] if len(candidates) > 1 else None

    def testing_at(self, date=None):
        """
        Get the current testing release.

        :param date: A :class:`~datetime.date` object (defaults to today).
        :returns: A :class:`~distro_lifecycle.releases.Release` object or :data:`None`.

        The testing release is the most recent versioned release that had been
        created and was not yet released on the given date. Releases whose
        release date hasn't been decided yet qualify as well.
        """
        date = coerce_date(date)
        candidates = [
            r for r in self.all_created_at(date)
            if r.version and (r.release_date is None or date < r.release_date)
        ]
        return candidates[-1] if candidates else None

    def unstable(self):
        """Get the release matching :data:`UNSTABLE_SERIES` (a :class:`~distro_lifecycle.releases.Release` object or :data:`None`)."""
        matches = self.find_series(UNSTABLE_SERIES)
        return matches[0] if matches else None

    def lts_supported_at(self, date=None):
        """Get the releases covered by Debian LTS on the given date (a list of :class:`~distro_lifecycle.releases.Release` objects)."""
        date = coerce_date(date)
        return [
            r for r in self.all_released_at(date)
            if r.version and r.eol_date and r.extended_eol_date
            and r.eol_date < date <= r.extended_eol_date
        ]

    def elts_supported_at(self, date=None):
        """Get the releases covered by Debian Extended LTS on the given date (a list of :class:`~distro_lifecycle.releases.Release` objects)."""
        date = coerce_date(date)
        return [
            r for r in self.all_released_at(date)
            if r.version and r.extended_eol_date and r.extended_security_eol_date
            and r.extended_eol_date < date <= r.extended_security_eol_date
        ]

    def alias_of(self, series, date=None):
        """
        Get the alias of a release on the given date.

        :param series: The short name of a release (a string like ``bookworm``).
        :param date: A :class:`~datetime.date` object (defaults to today).
        :returns: One of the strings ``unstable``, ``testing``, ``stable`` or
                  ``oldstable``, or :data:`None` when the release doesn't
                  currently have an alias.
        """
        date = coerce_date(date)
        roles = (
            ('unstable', self.unstable()),
            ('testing', self.testing_at(date)),
            ('stable', self.stable_at(date)),
            ('oldstable', self.oldstable_at(date)),
        )
        for alias, release in roles:
            if release is not None and release.series == series:
                logger.debug("Release %s is known as %s on %s.", series, alias, date)
                return alias
        return None


DISTRO_INFO_CLASS = DebianDistroInfo
"""The :class:`~distro_lifecycle.DistroInfo` subclass implemented by this backend."""
