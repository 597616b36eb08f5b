from unittest.mock import patch

import pytest

from ghssh.errors import UnsupportedPlatform
from ghssh.platform_guard import check_platform


def test_check_platform_darwin():
    check_platform('Darwin')


def test_check_platform_rejects_others():
    for system in ['Linux', 'Windows', '']:
        with pytest.raises(UnsupportedPlatform, match='macOS'):
            check_platform(system)


def test_check_platform_defaults_to_current_system():
    with patch('platform.system', return_value='Linux'):
        with pytest.raises(UnsupportedPlatform, match='Linux'):
            check_platform()
