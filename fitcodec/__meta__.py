# fitcodec
#
# Copyright (c) 2018 Jean-Charles Lefebvre
# All rights reserved.
#
# This code is licensed under the MIT License.
# See the LICENSE.txt file at the root of this project.

__version__ = '0.1.0'
version_info = (0, 1, 0)

__title__ = 'fitcodec'
__fancy_title__ = 'fitcodec'
__description__ = 'FIT file decoder, encoder and message dispatcher'
__url__ = ''
__license__ = 'MIT'
__author__ = 'Jean-Charles Lefebvre'
__author_email__ = ''
__copyright__ = 'Copyright Jean-Charles Lefebvre'

__keywords__ = [
    'fit', 'ant', 'file', 'parse', 'parser', 'decode', 'decoder', 'encode',
    'encoder', 'garmin']
