# Release lifecycle queries for Debian and Ubuntu.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 19, 2026
# URL: https://distro-lifecycle.readthedocs.io

"""
Easy to use metadata on Debian and Ubuntu releases.

The distro-info-data_ package contains CSV files with metadata about Debian and
Ubuntu releases: their version numbers, code names and the dates on which each
release was created, released and reached its `end of life`_ (EOL). This module
parses those CSV files into :class:`Release` objects that know how to answer
point-in-time questions like "was this release supported on a given date?".

The CSV files have a header row followed by one row per release with the
following columns (in this order):

1. ``version`` (e.g. ``18.04 LTS``)
2. ``codename`` (e.g. ``Bionic Beaver``)
3. ``series`` (e.g. ``bionic``)
4. ``created``
5. ``release``
6. ``eol``
7. ``eol-server`` (Ubuntu) or ``eol-lts`` (Debian)
8. ``eol-esm`` (Ubuntu) or ``eol-elts`` (Debian)

Date columns are either empty or formatted as ``YYYY-MM-DD``. Trailing columns
may be omitted.

.. _end of life: https://en.wikipedia.org/wiki/End-of-life_(product)
.. _distro-info-data: https://packages.debian.org/distro-info-data
"""

# Standard library modules.
import csv
import datetime
import logging

# External dependencies.
from property_manager import PropertyManager, key_property, lazy_property, writable_property

DISTRO_INFO_DIRECTORY = '/usr/share/distro-info'
"""The pathname of the directory with CSV files containing release metadata (a string)."""

LTS_MARKER = 'LTS'
"""The substring of :attr:`Release.version` that marks long term support releases (a string)."""

CSV_ENCODING = 'UTF-8'
"""The text encoding of the distro-info-data CSV files (a string)."""

CSV_FIELDS = (
    'version',
    'codename',
    'series',
    'created',
    'release',
    'eol',
    'eol-extended',
    'eol-extended-security',
)
"""The names of the columns in a distro-info-data CSV file (a tuple of strings)."""

DATE_FIELDS = {
    'created': 'created_date',
    'release': 'release_date',
    'eol': 'eol_date',
    'eol-extended': 'extended_eol_date',
    'eol-extended-security': 'extended_security_eol_date',
}
"""A dictionary mapping CSV date columns to :class:`Release` property names."""

# Public identifiers that require documentation.
__all__ = (
    'CSV_ENCODING',
    'CSV_FIELDS',
    'DATE_FIELDS',
    'DISTRO_INFO_DIRECTORY',
    'LTS_MARKER',
    'LoadError',
    'Release',
    'parse_csv',
    'parse_csv_file',
    'parse_date',
)

# Initialize a logger.
logger = logging.getLogger(__name__)


def parse_csv_file(filename, version_required=True):
    """
    Parse a CSV file in the format of the ``/usr/share/distro-info/*.csv`` files.

    :param filename: The pathname of the CSV file (a string).
    :param version_required: :data:`False` to allow releases without a
                             version number (defaults to :data:`True`).
    :returns: A list of :class:`Release` objects (in file order).
    :raises: :exc:`LoadError` when the file can't be read or contains
             malformed data.
    """
    logger.debug("Loading release metadata from %s ..", filename)
    try:
        with open(filename, encoding=CSV_ENCODING) as handle:
            return list(parse_csv(handle, source=filename, version_required=version_required))
    except EnvironmentError as e:
        raise LoadError("Failed to read release metadata! (%s)" % e)


def parse_csv(lines, source='<input>', version_required=True):
    """
    Parse release metadata from CSV formatted text.

    :param lines: An iterable of strings (e.g. an open file).
    :param source: A description of where the lines came from (a string, used
                   in error messages).
    :param version_required: :data:`False` to allow releases without a
                             version number (defaults to :data:`True`).
    :returns: A generator of :class:`Release` objects.
    :raises: :exc:`LoadError` when a row is malformed.

    The first non-empty row is expected to be a header and is skipped, blank
    lines are ignored. Because this is a generator callers that want all or
    nothing behavior should consume it completely before using the results
    (which is what :func:`parse_csv_file()` and :meth:`.DistroInfo.load()` do).
    """
    reader = csv.reader(lines)
    header = None
    try:
        for row in reader:
            if not row:
                continue
            if header is None:
                header = row
                continue
            yield parse_row(row, "line %i of %s" % (reader.line_num, source), version_required)
    except csv.Error as e:
        raise LoadError("Failed to parse CSV on line %i of %s! (%s)" % (reader.line_num, source, e))
    except UnicodeDecodeError as e:
        # Text is decoded in blocks, so the line number is approximate.
        raise LoadError("Failed to decode text near line %i of %s! (%s)" % (reader.line_num + 1, source, e))


def parse_row(row, location, version_required=True):
    """
    Convert a single CSV row to a :class:`Release` object.

    :param row: A list of strings.
    :param location: A description of the row's location (a string).
    :param version_required: See :func:`parse_csv()`.
    :returns: A :class:`Release` object.
    :raises: :exc:`LoadError` when the row is malformed.
    """
    if len(row) > len(CSV_FIELDS):
        msg = "Too many fields on %s! (expected at most %i, got %i)"
        raise LoadError(msg % (location, len(CSV_FIELDS), len(row)))
    # Trailing columns may be omitted, we treat them as empty fields.
    fields = dict(zip(CSV_FIELDS, [value.strip() for value in row] + [''] * (len(CSV_FIELDS) - len(row))))
    required = ('version', 'codename', 'series') if version_required else ('codename', 'series')
    for name in required:
        if not fields[name]:
            raise LoadError("Missing required field %r on %s!" % (name, location))
    properties = dict(version=fields['version'], codename=fields['codename'], series=fields['series'])
    for name, property_name in DATE_FIELDS.items():
        try:
            properties[property_name] = parse_date(fields[name])
        except ValueError:
            msg = "Failed to parse date in field %r on %s! (%r is not in YYYY-MM-DD format)"
            raise LoadError(msg % (name, location, fields[name]))
    return Release(**properties)


def parse_date(value):
    """Convert a ``YYYY-MM-DD`` string to a :class:`datetime.date` object (or :data:`None` for empty strings)."""
    return datetime.datetime.strptime(value, '%Y-%m-%d').date() if value else None


class Release(PropertyManager):

    """
    Data class for metadata on Debian and Ubuntu releases.

    The ``is_*_at()`` methods expect a :class:`datetime.date` object and treat
    the boundary days as inclusive: A release is released on its release date
    and supported on its EOL date.
    """

    @key_property
    def codename(self):
        """The long version of :attr:`series` (a string like ``Bionic Beaver``)."""

    @writable_property
    def created_date(self):
        """The date on which the release was created (a :class:`~datetime.date` object or :data:`None`)."""

    @writable_property
    def eol_date(self):
        """The date on which the release stops being supported (a :class:`~datetime.date` object or :data:`None`)."""

    @writable_property
    def extended_eol_date(self):
        """
        The date on which extended support stops (a :class:`~datetime.date` object or :data:`None`).

        For Ubuntu this is the end of server support of old LTS releases, for
        Debian it's the end of `Debian LTS`_ support.

        .. _Debian LTS: https://wiki.debian.org/LTS
        """

    @writable_property
    def extended_security_eol_date(self):
        """
        The date on which paid security maintenance stops (a :class:`~datetime.date` object or :data:`None`).

        This is Ubuntu ESM or Debian ELTS. It doesn't influence :func:`is_supported_at()`.
        """

    @lazy_property
    def is_lts(self):
        """:data:`True` if :attr:`version` contains :data:`LTS_MARKER`, :data:`False` otherwise."""
        return LTS_MARKER in (self.version or '')

    @writable_property
    def release_date(self):
        """The date on which the release was published (a :class:`~datetime.date` object or :data:`None`)."""

    @key_property
    def series(self):
        """The short version of :attr:`codename` (a string like ``bionic``)."""

    @writable_property
    def version(self):
        """The version of the release (a string like ``18.04 LTS``, may be empty for Debian's rolling series)."""

    @property
    def support_end_date(self):
        """The later of :attr:`eol_date` and :attr:`extended_eol_date` (a :class:`~datetime.date` object or :data:`None`)."""
        if self.eol_date:
            return max(self.eol_date, self.extended_eol_date or self.eol_date)

    def is_created_at(self, date):
        """Check whether work on the release had started on the given date."""
        return self.created_date is not None and date >= self.created_date

    def is_released_at(self, date):
        """Check whether the release was published on or before the given date (EOL doesn't change this)."""
        return self.release_date is not None and date >= self.release_date

    def is_supported_at(self, date):
        """
        Check whether the release was supported on the given date.

        :param date: A :class:`~datetime.date` object.
        :returns: :data:`True` when the release was created on or before `date`
                  and `date` doesn't come after :attr:`support_end_date`,
                  :data:`False` otherwise.

        Releases without an :attr:`eol_date` are never considered supported,
        regardless of :attr:`extended_eol_date`.
        """
        end_date = self.support_end_date
        return self.is_created_at(date) and end_date is not None and date <= end_date

    def __str__(self):
        """
        Render a human friendly representation of a :class:`Release` object.

        The result will be something like this:

        - 9 (stretch)
        - 18.04 LTS (bionic)
        """
        label = []
        if self.version:
            label.append(self.version)
        label.append("(%s)" % self.series)
        return " ".join(label)


class LoadError(Exception):

    """Raised when release metadata can't be read or contains malformed data."""
