# Release lifecycle queries for Debian and Ubuntu.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 19, 2026
# URL: https://distro-lifecycle.readthedocs.io

"""
Release lifecycle queries for Debian and Ubuntu.

The main entry point for this module is the :class:`DistroInfo` class and its
distribution specific subclasses :class:`~distro_lifecycle.backends.debian.DebianDistroInfo`
and :class:`~distro_lifecycle.backends.ubuntu.UbuntuDistroInfo`. You can also
take a look at the source code of the :mod:`distro_lifecycle.cli` module for
an example that uses these classes.
"""

# Standard library modules.
import datetime
import logging
import os
import sys

# External dependencies.
from humanfriendly import Timer, pluralize
from property_manager import PropertyManager, required_property

# Modules included in our package.
from distro_lifecycle.releases import parse_csv, parse_csv_file

# Semi-standard module versioning.
__version__ = '1.0'

OUTPUT_MODES = ('codename', 'fullname', 'release')
"""The supported values of the `mode` argument of :func:`DistroInfo.format_release()` (a tuple of strings)."""

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def find_distro_info(distributor_id):
    """
    Find the :class:`DistroInfo` subclass for the given distributor ID.

    :param distributor_id: The name of a distributor (a string like ``debian`` or ``ubuntu``).
    :returns: A subclass of :class:`DistroInfo`.
    :raises: :exc:`~exceptions.EnvironmentError` when no matching backend
             module is available.
    """
    module_path = "%s.backends.%s" % (__name__, distributor_id.lower())
    try:
        __import__(module_path)
    except ImportError:
        msg = "%s platform is unsupported! (only Debian and Ubuntu are supported)"
        raise EnvironmentError(msg % distributor_id.capitalize())
    else:
        return sys.modules[module_path].DISTRO_INFO_CLASS


class DistroInfo(PropertyManager):

    """
    An ordered table of :class:`~distro_lifecycle.releases.Release` objects for one distribution.

    The releases are kept in the order of the CSV file that they were loaded
    from, which is chronological. Several queries (:func:`latest_at()`,
    :func:`lts_at()`) depend on this because they select the last matching
    release instead of sorting.

    Subclasses set the following class attributes:

    - :attr:`distro_name`
    - :attr:`csv_file`
    - :attr:`version_required`

    All query methods accept an optional :class:`~datetime.date` object which
    defaults to today. None of them modify the table, so a loaded table can be
    shared freely.
    """

    distro_name = None
    """The human friendly name of the distribution (a string like ``Ubuntu``)."""

    csv_file = None
    """The default pathname of the CSV file to load (a string)."""

    version_required = True
    """Whether every release must have a version number (a boolean)."""

    @classmethod
    def load(cls, source=None):
        """
        Load release metadata into a new table.

        :param source: The pathname of a CSV file (a string or
                       :class:`os.PathLike` object), an iterable of
                       CSV formatted lines (e.g. an open file) or :data:`None`
                       to load :attr:`csv_file`.
        :returns: A :class:`DistroInfo` object.
        :raises: :exc:`~distro_lifecycle.releases.LoadError` when the input
                 can't be read or is malformed. No partially loaded table is
                 ever returned.
        """
        timer = Timer()
        if source is None:
            source = cls.csv_file
        if isinstance(source, (str, os.PathLike)):
            releases = parse_csv_file(os.fspath(source), version_required=cls.version_required)
        else:
            name = getattr(source, 'name', '<input>')
            releases = list(parse_csv(source, source=name, version_required=cls.version_required))
        noun = "%s release" % cls.distro_name if cls.distro_name else "release"
        logger.debug("Loaded %s in %s.", pluralize(len(releases), noun), timer)
        return cls(releases=tuple(releases))

    @required_property
    def releases(self):
        """The known releases in chronological order (a tuple of :class:`~distro_lifecycle.releases.Release` objects)."""

    def __iter__(self):
        """Iterate over :attr:`releases` (every call returns a new, independent iterator)."""
        return iter(self.releases)

    def __len__(self):
        """The number of :attr:`releases` (an integer)."""
        return len(self.releases)

    def all_created_at(self, date=None):
        """Get the releases whose development had started on the given date (a list of :class:`~distro_lifecycle.releases.Release` objects)."""
        date = coerce_date(date)
        return [r for r in self.releases if r.is_created_at(date)]

    def all_released_at(self, date=None):
        """Get the releases that had been published on the given date (a list of :class:`~distro_lifecycle.releases.Release` objects)."""
        date = coerce_date(date)
        return [r for r in self.releases if r.is_released_at(date)]

    def all_supported_at(self, date=None):
        """
        Get the releases that were supported on the given date.

        :param date: A :class:`~datetime.date` object (defaults to today).
        :returns: A list of :class:`~distro_lifecycle.releases.Release` objects.

        Note that this includes releases that are still in development but
        already have an EOL date, refer to
        :func:`~distro_lifecycle.releases.Release.is_supported_at()` for details.
        """
        date = coerce_date(date)
        return [r for r in self.releases if r.is_supported_at(date)]

    def all_unsupported_at(self, date=None):
        """Get the releases that had been published but were no longer supported on the given date (a list)."""
        date = coerce_date(date)
        return [r for r in self.all_released_at(date) if not r.is_supported_at(date)]

    def all_in_development_at(self, date=None):
        """
        Get the releases that were in development on the given date.

        :param date: A :class:`~datetime.date` object (defaults to today).
        :returns: A list of :class:`~distro_lifecycle.releases.Release` objects.

        A release is in development when it had been created and its release
        date is still in the future. Releases without a release date are
        never included.
        """
        date = coerce_date(date)
        return [
            r for r in self.all_created_at(date)
            if r.release_date is not None and date < r.release_date
        ]

    def latest_at(self, date=None):
        """
        Get the most recent release that was published and supported on the given date.

        :param date: A :class:`~datetime.date` object (defaults to today).
        :returns: A :class:`~distro_lifecycle.releases.Release` object or
                  :data:`None` when no release qualifies.
        """
        date = coerce_date(date)
        candidates = [r for r in self.all_supported_at(date) if r.is_released_at(date)]
        return candidates[-1] if candidates else None

    def lts_at(self, date=None):
        """Get the most recent long term support release created on the given date (a :class:`~distro_lifecycle.releases.Release` object or :data:`None`)."""
        candidates = [r for r in self.all_created_at(date) if r.is_lts]
        return candidates[-1] if candidates else None

    def stable_at(self, date=None):
        """Get the current stable release (an alias for :func:`latest_at()` that backends can override)."""
        return self.latest_at(date)

    def find_series(self, series):
        """
        Find the releases matching the given series.

        :param series: The short name of a release (a string like ``bionic``).
        :returns: A list of :class:`~distro_lifecycle.releases.Release`
                  objects whose :attr:`~distro_lifecycle.releases.Release.series`
                  is equal to `series` (empty when nothing matches).
        """
        return [r for r in self.releases if r.series == series]

    def format_release(self, release, mode='codename'):
        """
        Render a release for output on the terminal.

        :param release: A :class:`~distro_lifecycle.releases.Release` object.
        :param mode: One of the strings in :data:`OUTPUT_MODES`:

                     - ``codename`` renders the series (e.g. ``bionic``).
                     - ``fullname`` renders something like ``Ubuntu 18.04 LTS "Bionic Beaver"``.
                     - ``release`` renders the version (e.g. ``18.04 LTS``)
                       or the series when the release has no version.
        :returns: A string.
        :raises: :exc:`~exceptions.ValueError` when `mode` isn't supported.
        """
        if mode == 'codename':
            return release.series
        elif mode == 'fullname':
            label = [self.distro_name]
            if release.version:
                label.append(release.version)
            label.append('"%s"' % release.codename)
            return " ".join(label)
        elif mode == 'release':
            return release.version or release.series
        else:
            msg = "Unsupported output mode! (%r)"
            raise ValueError(msg % mode)

    def __str__(self):
        """Render a human friendly representation like ``Ubuntu (29 releases)``."""
        return "%s (%s)" % (self.distro_name, pluralize(len(self.releases), "release"))


def coerce_date(value):
    """
    Coerce a value to a :class:`datetime.date` object.

    :param value: :data:`None` (today), a :class:`~datetime.date` object or a
                  ``YYYY-MM-DD`` string.
    :returns: A :class:`datetime.date` object.
    :raises: :exc:`~exceptions.ValueError` when a string isn't a valid date.
    """
    if value is None:
        return datetime.date.today()
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        msg = "Failed to parse date %r! (must be in YYYY-MM-DD format)"
        raise ValueError(msg % value)
