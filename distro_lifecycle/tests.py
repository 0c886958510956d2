# Release lifecycle queries for Debian and Ubuntu.
#
# Author: Peter Odding <peter@peterodding.com>
# Last Change: October 19, 2026
# URL: https://distro-lifecycle.readthedocs.io

"""Test suite for the ``distro-lifecycle`` package."""

# Standard library modules.
import datetime
import io
import logging
import os
import pathlib

# External dependencies.
from humanfriendly.testing import TemporaryDirectory, TestCase, run_cli

# Modules included in our package.
from distro_lifecycle import DistroInfo, coerce_date, find_distro_info
from distro_lifecycle.backends.debian import DebianDistroInfo
from distro_lifecycle.backends.ubuntu import UbuntuDistroInfo
from distro_lifecycle.cli import debian_main, ubuntu_main
from distro_lifecycle.releases import LoadError, Release, parse_date

# Initialize a logger for this module.
logger = logging.getLogger(__name__)

UBUNTU_CSV = """\
version,codename,series,created,release,eol,eol-server,eol-esm
4.10,Warty Warthog,warty,2004-03-05,2004-10-20,2006-04-30
5.04,Hoary Hedgehog,hoary,2004-10-20,2005-04-08,2006-10-31
5.10,Breezy Badger,breezy,2005-04-08,2005-10-12,2007-04-13
6.06 LTS,Dapper Drake,dapper,2005-10-12,2006-06-01,2009-07-14,2011-06-01
6.10,Edgy Eft,edgy,2006-06-01,2006-10-26,2008-04-25
7.04,Feisty Fawn,feisty,2006-10-26,2007-04-19,2008-10-19
7.10,Gutsy Gibbon,gutsy,2007-04-19,2007-10-18,2009-04-18
8.04 LTS,Hardy Heron,hardy,2007-10-18,2008-04-24,2011-05-12,2013-05-09
8.10,Intrepid Ibex,intrepid,2008-04-24,2008-10-30,2010-04-30
9.04,Jaunty Jackalope,jaunty,2008-10-30,2009-04-23,2010-10-23
9.10,Karmic Koala,karmic,2009-04-23,2009-10-29,2011-04-30
10.04 LTS,Lucid Lynx,lucid,2009-10-29,2010-04-29,2013-05-09,2015-04-29
10.10,Maverick Meerkat,maverick,2010-04-29,2010-10-10,2012-04-10
11.04,Natty Narwhal,natty,2010-10-10,2011-04-28,2012-10-28
11.10,Oneiric Ocelot,oneiric,2011-04-28,2011-10-13,2013-05-09
12.04 LTS,Precise Pangolin,precise,2011-10-13,2012-04-26,2017-04-28,2017-04-28,2019-04-26
12.10,Quantal Quetzal,quantal,2012-04-26,2012-10-18,2014-05-16
13.04,Raring Ringtail,raring,2012-10-18,2013-04-25,2014-01-27
13.10,Saucy Salamander,saucy,2013-04-25,2013-10-17,2014-07-17
14.04 LTS,Trusty Tahr,trusty,2013-10-17,2014-04-17,2019-04-25,2019-04-25,2024-04-25
14.10,Utopic Unicorn,utopic,2014-04-17,2014-10-23,2015-07-23
15.04,Vivid Vervet,vivid,2014-10-23,2015-04-23,2016-02-04
15.10,Wily Werewolf,wily,2015-04-23,2015-10-22,2016-07-28
16.04 LTS,Xenial Xerus,xenial,2015-10-22,2016-04-21,2021-04-21,2021-04-21,2026-04-23
16.10,Yakkety Yak,yakkety,2016-04-21,2016-10-13,2017-07-20
17.04,Zesty Zapus,zesty,2016-10-13,2017-04-13,2018-01-13
17.10,Artful Aardvark,artful,2017-04-13,2017-10-19,2018-07-19
18.04 LTS,Bionic Beaver,bionic,2017-10-19,2018-04-26,2023-05-31,2023-05-31,2028-04-26
18.10,Cosmic Cuttlefish,cosmic,2018-04-26,2018-10-18,2019-07-18
"""

DEBIAN_CSV = """\
version,codename,series,created,release,eol,eol-lts,eol-elts
1.1,Buzz,buzz,1993-08-16,1996-06-17,1997-06-05
6.0,Squeeze,squeeze,2009-02-14,2011-02-06,2014-05-31,2016-02-29
7,Wheezy,wheezy,2011-02-06,2013-05-04,2016-04-25,2018-05-31,2020-06-30
8,Jessie,jessie,2013-05-04,2015-04-25,2018-06-17,2020-06-30,2025-06-30
9,Stretch,stretch,2015-04-25,2017-06-17,2020-07-18,2022-06-30,2027-06-30
10,Buster,buster,2017-06-17,2019-07-06,2022-09-10,2024-06-30,2029-06-30
11,Bullseye,bullseye,2019-07-06,2021-08-14,2024-08-14,2026-08-31,2031-06-30
12,Bookworm,bookworm,2021-08-14,2023-06-10
13,Trixie,trixie,2023-06-10
,Sid,sid,1993-08-16
,Experimental,experimental,1993-08-16
"""

UBUNTU_SUPPORTED_2018 = ['trusty', 'xenial', 'artful', 'bionic', 'cosmic']
"""The Ubuntu releases in :data:`UBUNTU_CSV` that were supported on 2018-06-14."""


class DistroLifecycleTestCase(TestCase):

    """:mod:`unittest` compatible container for the :mod:`distro_lifecycle` test suite."""

    def test_lts_detection(self):
        """Test that long term support releases are recognized by their version."""
        assert make_release(version='98.04 LTS').is_lts
        assert not make_release(version='98.04').is_lts

    def test_supported_boundaries(self):
        """Test that support starts and ends on the (inclusive) boundary days."""
        release = make_release(
            created_date=datetime.date(2018, 6, 14),
            release_date=datetime.date(2018, 6, 14),
            eol_date=datetime.date(2018, 6, 16),
            extended_eol_date=datetime.date(2018, 6, 14),
        )
        assert not release.is_supported_at(datetime.date(2018, 6, 13))
        assert release.is_supported_at(datetime.date(2018, 6, 14))
        assert release.is_supported_at(datetime.date(2018, 6, 16))
        assert not release.is_supported_at(datetime.date(2018, 6, 17))

    def test_extended_support(self):
        """Test that the extended EOL date extends support beyond the regular EOL date."""
        release = make_release(
            created_date=datetime.date(2005, 10, 12),
            release_date=datetime.date(2006, 6, 1),
            eol_date=datetime.date(2009, 7, 14),
            extended_eol_date=datetime.date(2011, 6, 1),
        )
        assert release.support_end_date == datetime.date(2011, 6, 1)
        assert release.is_supported_at(datetime.date(2011, 6, 1))
        assert not release.is_supported_at(datetime.date(2011, 6, 2))

    def test_support_requires_eol_date(self):
        """Test that releases without an EOL date are never considered supported."""
        release = make_release(
            created_date=datetime.date(2018, 1, 1),
            release_date=datetime.date(2018, 6, 1),
            extended_eol_date=datetime.date(2030, 1, 1),
        )
        assert release.support_end_date is None
        assert not release.is_supported_at(datetime.date(2019, 1, 1))

    def test_released_is_monotonic(self):
        """Test that a release stays released forever, even after its EOL date."""
        release = make_release(
            created_date=datetime.date(2004, 3, 5),
            release_date=datetime.date(2004, 10, 20),
            eol_date=datetime.date(2006, 4, 30),
        )
        date = datetime.date(2004, 10, 1)
        previous = False
        for i in range(0, 2000, 7):
            current = release.is_released_at(date + datetime.timedelta(days=i))
            assert current or not previous
            previous = current
        assert release.is_released_at(datetime.date(2004, 10, 20))
        assert not release.is_released_at(datetime.date(2004, 10, 19))
        assert release.is_released_at(datetime.date(2030, 1, 1))

    def test_missing_dates(self):
        """Test that releases without dates are neither created nor released."""
        release = make_release()
        assert not release.is_created_at(datetime.date.today())
        assert not release.is_released_at(datetime.date.today())
        assert not release.is_supported_at(datetime.date.today())

    def test_release_rendering(self):
        """Test the human friendly rendering of release objects."""
        assert str(make_release(version='18.04 LTS', series='bionic')) == '18.04 LTS (bionic)'
        assert str(make_release(version='', series='sid')) == '(sid)'

    def test_parse_date(self):
        """Test the parsing of ``YYYY-MM-DD`` strings."""
        assert parse_date('2018-06-14') == datetime.date(2018, 6, 14)
        assert parse_date('') is None
        self.assertRaises(ValueError, parse_date, '14/06/2018')

    def test_load_preserves_order(self):
        """Test that iteration follows the order of the CSV file and is repeatable."""
        distro_info = load_ubuntu()
        expected = [line.split(',')[2] for line in UBUNTU_CSV.splitlines()[1:]]
        assert len(distro_info) == len(expected)
        assert [r.series for r in distro_info] == expected
        assert [r.series for r in distro_info] == expected

    def test_iterators_are_independent(self):
        """Test that multiple iterators over one table don't share state."""
        distro_info = load_ubuntu()
        iterator1 = iter(distro_info)
        iterator2 = iter(distro_info)
        assert next(iterator1).series == 'warty'
        assert next(iterator1).series == 'hoary'
        assert next(iterator2).series == 'warty'

    def test_load_fields(self):
        """Test that all fields of a CSV row are parsed."""
        distro_info = load_ubuntu()
        warty = distro_info.find_series('warty')[0]
        assert warty.version == '4.10'
        assert warty.codename == 'Warty Warthog'
        assert warty.created_date == datetime.date(2004, 3, 5)
        assert warty.release_date == datetime.date(2004, 10, 20)
        assert warty.eol_date == datetime.date(2006, 4, 30)
        assert warty.extended_eol_date is None
        assert warty.extended_security_eol_date is None
        dapper = distro_info.find_series('dapper')[0]
        assert dapper.extended_eol_date == datetime.date(2011, 6, 1)
        bionic = distro_info.find_series('bionic')[0]
        assert bionic.extended_security_eol_date == datetime.date(2028, 4, 26)
        assert bionic.is_lts

    def test_load_missing_series(self):
        """Test that a row without a series fails the whole load."""
        source = io.StringIO(u"version,codename,series,created,release,eol\n98.04 LTS,Test Release,,2018-01-01,2018-06-14,2023-06-14\n")
        with self.assertRaises(LoadError) as context:
            UbuntuDistroInfo.load(source)
        assert 'series' in str(context.exception)
        assert 'line 2' in str(context.exception)

    def test_load_missing_version(self):
        """Test that only Debian allows releases without a version."""
        contents = u"version,codename,series,created\n,Sid,sid,1993-08-16\n"
        self.assertRaises(LoadError, UbuntuDistroInfo.load, io.StringIO(contents))
        distro_info = DebianDistroInfo.load(io.StringIO(contents))
        assert [r.series for r in distro_info] == ['sid']

    def test_load_invalid_date(self):
        """Test that unparsable dates fail the whole load."""
        source = io.StringIO(u"header\n18.04 LTS,Bionic Beaver,bionic,2017-10-19,2018-04-31,2023-05-31\n")
        with self.assertRaises(LoadError) as context:
            UbuntuDistroInfo.load(source)
        assert 'release' in str(context.exception)
        assert '2018-04-31' in str(context.exception)

    def test_load_too_many_fields(self):
        """Test that rows with more fields than known columns are rejected."""
        source = io.StringIO(u"header\n1,A,a,2000-01-01,2000-01-02,2000-01-03,,,2000-01-04\n")
        self.assertRaises(LoadError, UbuntuDistroInfo.load, source)

    def test_load_short_rows(self):
        """Test that omitted trailing columns are treated as empty fields."""
        distro_info = UbuntuDistroInfo.load(io.StringIO(u"header\n\n1,A,a\n2,B,b,2000-01-01\n"))
        a, b = distro_info
        assert a.created_date is None
        assert b.created_date == datetime.date(2000, 1, 1)
        assert b.release_date is None

    def test_load_missing_file(self):
        """Test that unreadable files are reported as :exc:`~distro_lifecycle.releases.LoadError`."""
        with TemporaryDirectory() as directory:
            self.assertRaises(LoadError, UbuntuDistroInfo.load, os.path.join(directory, 'missing.csv'))

    def test_load_from_file(self):
        """Test that release metadata can be loaded from a pathname."""
        with TemporaryDirectory() as directory:
            filename = write_csv(directory, UBUNTU_CSV)
            distro_info = UbuntuDistroInfo.load(filename)
            assert len(distro_info) == 29
            assert str(distro_info) == 'Ubuntu (29 releases)'

    def test_load_from_path_object(self):
        """Test that release metadata can be loaded from a :class:`pathlib.Path` object."""
        with TemporaryDirectory() as directory:
            filename = pathlib.Path(write_csv(directory, UBUNTU_CSV))
            distro_info = UbuntuDistroInfo.load(filename)
            assert [r.series for r in distro_info][:2] == ['warty', 'hoary']

    def test_load_undecodable_file(self):
        """Test that text decoding errors are reported as :exc:`~distro_lifecycle.releases.LoadError`."""
        with TemporaryDirectory() as directory:
            filename = os.path.join(directory, 'releases.csv')
            with open(filename, 'wb') as handle:
                handle.write(b'version,codename,series\n18.04,Bionic \xff\xfe,bionic,2017-10-19\n')
            with self.assertRaises(LoadError) as context:
                UbuntuDistroInfo.load(filename)
            assert filename in str(context.exception)

    def test_load_leading_blank_lines(self):
        """Test that the header is recognized when the input starts with blank lines."""
        distro_info = UbuntuDistroInfo.load(io.StringIO(u"\n\nversion,codename,series,created\n1,A,a,2000-01-01\n"))
        assert [r.series for r in distro_info] == ['a']

    def test_load_logging(self):
        """Test that loading reports the number of releases per distribution."""
        with self.assertLogs('distro_lifecycle', level='DEBUG') as context:
            load_debian()
        assert any('Loaded 11 Debian releases in' in line for line in context.output)

    def test_all_created(self):
        """Test the selection of releases whose development had started."""
        distro_info = load_ubuntu()
        series = [r.series for r in distro_info.all_created_at(datetime.date(2005, 6, 14))]
        assert series == ['warty', 'hoary', 'breezy']
        # Development starts on the created date.
        series = [r.series for r in distro_info.all_created_at(datetime.date(2005, 4, 8))]
        assert series == ['warty', 'hoary', 'breezy']

    def test_released(self):
        """Test that a release is included on its exact release date."""
        distro_info = load_ubuntu()
        bionic = distro_info.find_series('bionic')[0]
        assert bionic in distro_info.all_released_at(bionic.release_date)
        assert bionic not in distro_info.all_released_at(bionic.release_date - datetime.timedelta(days=1))

    def test_supported(self):
        """Test the selection of supported releases."""
        distro_info = load_ubuntu()
        series = [r.series for r in distro_info.all_supported_at(datetime.date(2018, 6, 14))]
        assert series == UBUNTU_SUPPORTED_2018

    def test_unsupported(self):
        """Test that supported and unsupported releases partition the released releases."""
        distro_info = load_ubuntu()
        for date in (datetime.date(2005, 6, 14), datetime.date(2011, 6, 1), datetime.date(2018, 6, 14)):
            supported = distro_info.all_supported_at(date)
            unsupported = distro_info.all_unsupported_at(date)
            released = distro_info.all_released_at(date)
            assert not set(supported) & set(unsupported)
            assert set(unsupported) | set(r for r in supported if r in released) == set(released)
        series = [r.series for r in distro_info.all_unsupported_at(datetime.date(2018, 6, 14))]
        assert 'zesty' in series
        assert 'artful' not in series
        assert 'cosmic' not in series

    def test_devel(self):
        """Test the selection of releases in development."""
        distro_info = load_ubuntu()
        series = [r.series for r in distro_info.all_in_development_at(datetime.date(2018, 6, 14))]
        assert series == ['cosmic']
        assert distro_info.all_in_development_at(datetime.date(2018, 10, 18)) == []

    def test_devel_requires_release_date(self):
        """Test that releases without a release date aren't considered to be in development."""
        distro_info = UbuntuDistroInfo.load(io.StringIO(u"header\n99.04,Test,test,2018-01-01\n"))
        assert distro_info.all_created_at(datetime.date(2018, 6, 14))
        assert distro_info.all_in_development_at(datetime.date(2018, 6, 14)) == []
        assert distro_info.all_released_at(datetime.date(2018, 6, 14)) == []

    def test_latest(self):
        """Test the selection of the latest release."""
        distro_info = load_ubuntu()
        assert distro_info.latest_at(datetime.date(2018, 6, 14)).series == 'bionic'
        assert distro_info.latest_at(datetime.date(2005, 6, 14)).series == 'hoary'
        assert distro_info.stable_at(datetime.date(2018, 6, 14)).series == 'bionic'

    def test_latest_without_result(self):
        """Test that :func:`~distro_lifecycle.DistroInfo.latest_at()` returns :data:`None` when nothing qualifies."""
        distro_info = load_ubuntu()
        assert distro_info.latest_at(datetime.date(2000, 1, 1)) is None
        assert distro_info.latest_at(datetime.date(2030, 1, 1)) is None

    def test_lts(self):
        """Test the selection of the latest LTS release."""
        distro_info = load_ubuntu()
        assert distro_info.lts_at(datetime.date(2018, 6, 14)).series == 'bionic'
        assert distro_info.lts_at(datetime.date(2007, 1, 1)).series == 'dapper'
        assert distro_info.lts_at(datetime.date(2005, 1, 1)) is None

    def test_find_series(self):
        """Test the exact matching of series."""
        distro_info = load_ubuntu()
        assert [r.codename for r in distro_info.find_series('bionic')] == ['Bionic Beaver']
        assert distro_info.find_series('Bionic') == []
        assert distro_info.find_series('bion') == []

    def test_format_release(self):
        """Test the rendering of releases in the supported output modes."""
        ubuntu = load_ubuntu()
        bionic = ubuntu.find_series('bionic')[0]
        assert ubuntu.format_release(bionic) == 'bionic'
        assert ubuntu.format_release(bionic, 'fullname') == 'Ubuntu 18.04 LTS "Bionic Beaver"'
        assert ubuntu.format_release(bionic, 'release') == '18.04 LTS'
        self.assertRaises(ValueError, ubuntu.format_release, bionic, 'unknown')
        debian = load_debian()
        sid = debian.unstable()
        assert debian.format_release(sid, 'fullname') == 'Debian "Sid"'
        assert debian.format_release(sid, 'release') == 'sid'

    def test_debian_releases(self):
        """Test the Debian specific release roles."""
        debian = load_debian()
        date = datetime.date(2024, 1, 1)
        assert debian.stable_at(date).series == 'bookworm'
        assert debian.oldstable_at(date).series == 'bullseye'
        assert debian.testing_at(date).series == 'trixie'
        assert debian.unstable().series == 'sid'
        assert debian.oldstable_at(datetime.date(1996, 7, 1)) is None
        assert debian.stable_at(datetime.date(1995, 1, 1)) is None

    def test_debian_lts(self):
        """Test the selection of Debian LTS and ELTS releases."""
        debian = load_debian()
        date = datetime.date(2024, 1, 1)
        assert [r.series for r in debian.lts_supported_at(date)] == ['buster']
        assert [r.series for r in debian.elts_supported_at(date)] == ['jessie', 'stretch']
        assert [r.series for r in debian.all_supported_at(date)] == ['buster', 'bullseye']
        assert debian.latest_at(date).series == 'bullseye'

    def test_debian_alias(self):
        """Test the aliases of Debian releases."""
        debian = load_debian()
        date = datetime.date(2024, 1, 1)
        assert debian.alias_of('sid', date) == 'unstable'
        assert debian.alias_of('trixie', date) == 'testing'
        assert debian.alias_of('bookworm', date) == 'stable'
        assert debian.alias_of('bullseye', date) == 'oldstable'
        assert debian.alias_of('buster', date) is None

    def test_debian_oldstable_after_eol(self):
        """Test that oldstable keeps its role after its regular EOL date."""
        debian = load_debian()
        date = datetime.date(2025, 1, 1)
        assert debian.stable_at(date).series == 'bookworm'
        assert debian.oldstable_at(date).series == 'bullseye'
        assert debian.alias_of('bullseye', date) == 'oldstable'
        assert debian.alias_of('buster', date) is None

    def test_find_distro_info(self):
        """Test the lookup of distribution specific table classes."""
        assert find_distro_info('ubuntu') is UbuntuDistroInfo
        assert find_distro_info('Debian') is DebianDistroInfo
        assert issubclass(find_distro_info('debian'), DistroInfo)
        self.assertRaises(EnvironmentError, find_distro_info, 'gentoo')

    def test_coerce_date(self):
        """Test the coercion of dates."""
        assert coerce_date(None) == datetime.date.today()
        assert coerce_date('2018-06-14') == datetime.date(2018, 6, 14)
        assert coerce_date(datetime.datetime(2018, 6, 14, 12, 0)) == datetime.date(2018, 6, 14)
        self.assertRaises(ValueError, coerce_date, '2018-06-31')

    def test_cli_supported(self):
        """Test the ``--supported`` option of ``ubuntu-distro-info``."""
        with TemporaryDirectory() as directory:
            filename = write_csv(directory, UBUNTU_CSV)
            exit_code, output = run_cli(ubuntu_main, '--supported', '--date=2018-06-14', '--csv-file=%s' % filename)
            assert exit_code == 0
            assert output.split() == UBUNTU_SUPPORTED_2018

    def test_cli_output_modes(self):
        """Test the ``--fullname`` and ``--release`` options."""
        with TemporaryDirectory() as directory:
            filename = write_csv(directory, UBUNTU_CSV)
            exit_code, output = run_cli(ubuntu_main, '--series=bionic', '--fullname', '-F', filename)
            assert exit_code == 0
            assert output.strip() == 'Ubuntu 18.04 LTS "Bionic Beaver"'
            exit_code, output = run_cli(ubuntu_main, '--stable', '--release', '--date=2018-06-14', '-F', filename)
            assert exit_code == 0
            assert output.strip() == '18.04 LTS'
            exit_code, output = run_cli(ubuntu_main, '--lts', '--date=2018-06-14', '-F', filename)
            assert exit_code == 0
            assert output.strip() == 'bionic'

    def test_cli_errors(self):
        """Test that the command line interface reports errors using its exit code."""
        with TemporaryDirectory() as directory:
            filename = write_csv(directory, UBUNTU_CSV)
            # Unknown series.
            exit_code, output = run_cli(ubuntu_main, '--series=unknown', '-F', filename)
            assert exit_code == 1
            # No selector.
            exit_code, output = run_cli(ubuntu_main, '-F', filename)
            assert exit_code == 1
            # Multiple selectors.
            exit_code, output = run_cli(ubuntu_main, '--all', '--devel', '-F', filename)
            assert exit_code == 1
            # Invalid date.
            exit_code, output = run_cli(ubuntu_main, '--all', '--date=2018-13-01', '-F', filename)
            assert exit_code == 1
            # No latest release.
            exit_code, output = run_cli(ubuntu_main, '--latest', '--date=2000-01-01', '-F', filename)
            assert exit_code == 1
            # Missing CSV file.
            exit_code, output = run_cli(ubuntu_main, '--all', '-F', os.path.join(directory, 'missing.csv'))
            assert exit_code == 1
            # Debian specific options aren't available for Ubuntu.
            exit_code, output = run_cli(ubuntu_main, '--testing', '-F', filename)
            assert exit_code == 1

    def test_cli_debian(self):
        """Test the Debian specific options of ``debian-distro-info``."""
        with TemporaryDirectory() as directory:
            filename = write_csv(directory, DEBIAN_CSV)
            exit_code, output = run_cli(debian_main, '--testing', '--date=2024-01-01', '-F', filename)
            assert exit_code == 0
            assert output.strip() == 'trixie'
            exit_code, output = run_cli(debian_main, '--oldstable', '--fullname', '--date=2024-01-01', '-F', filename)
            assert exit_code == 0
            assert output.strip() == 'Debian 11 "Bullseye"'
            exit_code, output = run_cli(debian_main, '--elts', '--date=2024-01-01', '-F', filename)
            assert exit_code == 0
            assert output.split() == ['jessie', 'stretch']
            exit_code, output = run_cli(debian_main, '--alias=bookworm', '--date=2024-01-01', '-F', filename)
            assert exit_code == 0
            assert output.strip() == 'stable'
            exit_code, output = run_cli(debian_main, '--alias=buster', '--date=2024-01-01', '-F', filename)
            assert exit_code == 0
            assert output.strip() == 'buster'

    def test_cli_all(self):
        """Test the ``--all`` option on Debian data with unversioned releases."""
        with TemporaryDirectory() as directory:
            filename = write_csv(directory, DEBIAN_CSV)
            exit_code, output = run_cli(debian_main, '--all', '--release', '-F', filename)
            assert exit_code == 0
            lines = output.split()
            assert lines[0] == '1.1'
            assert lines[-2:] == ['sid', 'experimental']

    def test_cli_oldstable_after_eol(self):
        """Test the ``--oldstable`` option after the oldstable release reached its EOL date."""
        with TemporaryDirectory() as directory:
            filename = write_csv(directory, DEBIAN_CSV)
            exit_code, output = run_cli(debian_main, '--oldstable', '--date=2025-01-01', '-F', filename)
            assert exit_code == 0
            assert output.strip() == 'bullseye'


def make_release(**options):
    """Create a :class:`~distro_lifecycle.releases.Release` object with default identifying fields."""
    options.setdefault('codename', 'Test Release')
    options.setdefault('series', 'test')
    options.setdefault('version', '98.04')
    return Release(**options)


def load_ubuntu():
    """Load :data:`UBUNTU_CSV` into a :class:`~distro_lifecycle.backends.ubuntu.UbuntuDistroInfo` object."""
    return UbuntuDistroInfo.load(io.StringIO(UBUNTU_CSV))


def load_debian():
    """Load :data:`DEBIAN_CSV` into a :class:`~distro_lifecycle.backends.debian.DebianDistroInfo` object."""
    return DebianDistroInfo.load(io.StringIO(DEBIAN_CSV))


def write_csv(directory, contents):
    """Write CSV formatted release metadata to a file in the given directory and return its pathname."""
    filename = os.path.join(directory, 'releases.csv')
    with open(filename, 'w') as handle:
        handle.write(contents)
    return filename
