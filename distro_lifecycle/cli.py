# Release lifecycle queries for Debian and Ubuntu.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 19, 2026
# URL: https://distro-lifecycle.readthedocs.io

"""
Usage: ubuntu-distro-info [OPTIONS]
       debian-distro-info [OPTIONS]

Report on the lifecycle of Ubuntu and Debian releases based on the CSV files
in /usr/share/distro-info. Exactly one of the selectors below is required.

Selectors:

  -a, --all

    List all known releases.

  -d, --devel

    List the releases in development on the given date.

  -s, --stable

    Report the latest stable release.

  --supported

    List the releases supported on the given date.

  --unsupported

    List the releases that were published but are no longer supported.

  --series=SERIES

    Report the release with the given series (e.g. bionic).

  -l, --latest (ubuntu-distro-info), --latest (debian-distro-info)

    Report the latest release that was published and supported.

  --lts (ubuntu-distro-info)

    Report the latest long term support release.

  -l, --lts (debian-distro-info)

    List the releases supported by Debian LTS.

  -e, --elts (debian-distro-info)

    List the releases supported by Debian Extended LTS.

  -o, --oldstable, --old (debian-distro-info)

    Report the latest oldstable release.

  -t, --testing (debian-distro-info)

    Report the current testing release.

  --alias=SERIES (debian-distro-info)

    Print the alias (oldstable, stable, testing or unstable) of the given
    release, or the release itself when it doesn't have an alias.

Output options:

  -c, --codename

    Print the series of each release (this is the default).

  -f, --fullname

    Print the distribution name, version and code name of each release.

  -r, --release

    Print the version of each release.

Other options:

  --date=YYYY-MM-DD

    Answer the question for the given date instead of today.

  -F, --csv-file=PATH

    Read release metadata from the given CSV file instead of the default file
    in /usr/share/distro-info.

  -v, --verbose

    Increase logging verbosity (can be repeated).

  -V, --version

    Show version number and Python version.

  -q, --quiet

    Decrease logging verbosity (can be repeated).

  -h, --help

    Show this message and exit.
"""

# Standard library modules.
import functools
import getopt
import logging
import sys

# External dependencies.
import coloredlogs
from humanfriendly.terminal import output, usage, warning

# Modules included in our package.
from distro_lifecycle import __version__ as program_version
from distro_lifecycle import coerce_date, find_distro_info
from distro_lifecycle.releases import LoadError

COMMON_LONG_OPTIONS = [
    'all', 'devel', 'stable', 'supported', 'unsupported', 'series=',
    'codename', 'fullname', 'release', 'date=', 'csv-file=',
    'verbose', 'version', 'quiet', 'help',
]
"""The long options supported by both programs (a list of strings)."""

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def ubuntu_main():
    """Command line interface for the ``ubuntu-distro-info`` program."""
    main('ubuntu')


def debian_main():
    """Command line interface for the ``debian-distro-info`` program."""
    main('debian')


def main(distributor_id='ubuntu'):
    """
    Command line interface shared by the ``*-distro-info`` programs.

    :param distributor_id: The name of the distributor whose releases should
                           be queried (a string like ``debian`` or ``ubuntu``).
    """
    # Initialize logging to the terminal.
    coloredlogs.install()
    # Command line option defaults.
    is_debian = (distributor_id == 'debian')
    date = None
    csv_file = None
    mode = 'codename'
    selectors = []
    # Parse the command line arguments.
    try:
        distro_class = find_distro_info(distributor_id)
        if is_debian:
            short_options = 'adsleotF:cfrvVqh'
            long_options = COMMON_LONG_OPTIONS + ['latest', 'lts', 'elts', 'oldstable', 'old', 'testing', 'alias=']
        else:
            short_options = 'adslF:cfrvVqh'
            long_options = COMMON_LONG_OPTIONS + ['latest', 'lts']
        options, arguments = getopt.getopt(sys.argv[1:], short_options, long_options)
        for option, value in options:
            if option in ('-a', '--all'):
                selectors.append(select_all)
            elif option in ('-d', '--devel'):
                selectors.append(select_devel)
            elif option in ('-s', '--stable'):
                selectors.append(select_stable)
            elif option == '--supported':
                selectors.append(select_supported)
            elif option == '--unsupported':
                selectors.append(select_unsupported)
            elif option == '--series':
                selectors.append(functools.partial(select_series, value))
            elif option == '--latest' or (option == '-l' and not is_debian):
                selectors.append(select_latest)
            elif option in ('-l', '--lts'):
                selectors.append(select_lts_supported if is_debian else select_lts)
            elif option in ('-e', '--elts'):
                selectors.append(select_elts_supported)
            elif option in ('-o', '--oldstable', '--old'):
                selectors.append(select_oldstable)
            elif option in ('-t', '--testing'):
                selectors.append(select_testing)
            elif option == '--alias':
                selectors.append(functools.partial(select_alias, value))
            elif option in ('-c', '--codename'):
                mode = 'codename'
            elif option in ('-f', '--fullname'):
                mode = 'fullname'
            elif option in ('-r', '--release'):
                mode = 'release'
            elif option == '--date':
                date = coerce_date(value)
            elif option in ('-F', '--csv-file'):
                csv_file = value
            elif option in ('-v', '--verbose'):
                coloredlogs.increase_verbosity()
            elif option in ('-V', '--version'):
                output("Version: %s on Python %i.%i", program_version, sys.version_info[0], sys.version_info[1])
                return
            elif option in ('-q', '--quiet'):
                coloredlogs.decrease_verbosity()
            elif option in ('-h', '--help'):
                usage(__doc__)
                return
            else:
                assert False, "Unhandled option!"
        if arguments:
            raise Exception("Unexpected positional arguments! (%s)" % " ".join(arguments))
        if len(selectors) != 1:
            raise Exception("Exactly one selector option is required!")
        if date is None:
            date = coerce_date(None)
    except Exception as e:
        warning("Error: Failed to parse command line arguments! (%s)", e)
        sys.exit(1)
    # Perform the requested query.
    try:
        distro_info = distro_class.load(csv_file)
        for line in selectors[0](distro_info, date, mode):
            output(line)
    except (LoadError, QueryError) as e:
        warning("Error: %s", e)
        sys.exit(1)
    except Exception:
        logger.exception("Encountered unexpected exception! Aborting ..")
        sys.exit(1)


def format_releases(distro_info, releases, mode):
    """Render a list of releases as a list of strings (one per release)."""
    return [distro_info.format_release(release, mode) for release in releases]


def format_single(distro_info, release, mode, description, date):
    """Render a single release, raising :exc:`QueryError` when there is none."""
    if release is None:
        msg = "No %s %s release found on %s!"
        raise QueryError(msg % (description, distro_info.distro_name, date))
    return [distro_info.format_release(release, mode)]


def select_all(distro_info, date, mode):
    """Report all releases."""
    return format_releases(distro_info, distro_info, mode)


def select_devel(distro_info, date, mode):
    """Report the releases in development."""
    return format_releases(distro_info, distro_info.all_in_development_at(date), mode)


def select_supported(distro_info, date, mode):
    """Report the supported releases."""
    return format_releases(distro_info, distro_info.all_supported_at(date), mode)


def select_unsupported(distro_info, date, mode):
    """Report the unsupported releases."""
    return format_releases(distro_info, distro_info.all_unsupported_at(date), mode)


def select_stable(distro_info, date, mode):
    """Report the stable release."""
    return format_single(distro_info, distro_info.stable_at(date), mode, "stable", date)


def select_latest(distro_info, date, mode):
    """Report the latest release."""
    return format_single(distro_info, distro_info.latest_at(date), mode, "released and supported", date)


def select_lts(distro_info, date, mode):
    """Report the latest LTS release."""
    return format_single(distro_info, distro_info.lts_at(date), mode, "LTS", date)


def select_lts_supported(distro_info, date, mode):
    """Report the releases supported by Debian LTS."""
    return format_releases(distro_info, distro_info.lts_supported_at(date), mode)


def select_elts_supported(distro_info, date, mode):
    """Report the releases supported by Debian Extended LTS."""
    return format_releases(distro_info, distro_info.elts_supported_at(date), mode)


def select_oldstable(distro_info, date, mode):
    """Report the oldstable release."""
    return format_single(distro_info, distro_info.oldstable_at(date), mode, "oldstable", date)


def select_testing(distro_info, date, mode):
    """Report the testing release."""
    return format_single(distro_info, distro_info.testing_at(date), mode, "testing", date)


def select_series(series, distro_info, date, mode):
    """Report the release(s) matching the given series."""
    matches = distro_info.find_series(series)
    if not matches:
        raise QueryError("unknown distribution series `%s'" % series)
    return format_releases(distro_info, matches, mode)


def select_alias(series, distro_info, date, mode):
    """Report the alias of the given release (or the release itself)."""
    if not distro_info.find_series(series):
        raise QueryError("unknown distribution series `%s'" % series)
    return [distro_info.alias_of(series, date) or series]


class QueryError(Exception):

    """Raised when a query requested on the command line doesn't produce a result."""
