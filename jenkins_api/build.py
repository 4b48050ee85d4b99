#!/usr/bin/env python
# Software License Agreement (BSD License)
#
# Copyright (c) 2010, Willow Garage, Inc.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
#  * Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
#  * Redistributions in binary form must reproduce the above
#    copyright notice, this list of conditions and the following
#    disclaimer in the documentation and/or other materials provided
#    with the distribution.
#  * Neither the name of Willow Garage, Inc. nor the names of its
#    contributors may be used to endorse or promote products derived
#    from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# 'AS IS' AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
# FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
# COPYRIGHT OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING,
# BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES;
# LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT
# LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN
# ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

'''
.. module:: jenkins_api.build
    :platform: Unix, Windows
    :synopsis: Build references, by number or by alias
'''

import re

LAST_BUILD = 'lastBuild'
LAST_SUCCESSFUL_BUILD = 'lastSuccessfulBuild'
LAST_STABLE_BUILD = 'lastStableBuild'
LAST_COMPLETED_BUILD = 'lastCompletedBuild'
LAST_FAILED_BUILD = 'lastFailedBuild'
LAST_UNSUCCESSFUL_BUILD = 'lastUnsuccessfulBuild'

ALIASES = (
    LAST_BUILD,
    LAST_SUCCESSFUL_BUILD,
    LAST_STABLE_BUILD,
    LAST_COMPLETED_BUILD,
    LAST_FAILED_BUILD,
    LAST_UNSUCCESSFUL_BUILD,
)

# Build numbers are unsigned 32 bits on the server
MAX_BUILD_NUMBER = 2 ** 32 - 1

_DIGITS = re.compile(r'^[0-9]+\Z')


def parse_number(segment):
    '''Read a URL segment as a build number.

    Only ASCII digits are accepted, and the value must fit in
    :data:`MAX_BUILD_NUMBER`.

    :param segment: URL segment, ``str``
    :returns: the number, ``int``, or ``None`` when the segment is not one
    '''
    if not _DIGITS.match(segment):
        return None
    number = int(segment)
    if number > MAX_BUILD_NUMBER:
        return None
    return number


class BuildNumber(object):
    '''Reference to a build of a job.

    Either a build number, one of the aliases Jenkins understands
    (``lastBuild``, ``lastSuccessfulBuild``, ...) or any other string, which
    is kept verbatim so that aliases added to Jenkins later still work.

    Example::

        >>> BuildNumber(42)
        BuildNumber(42)
        >>> str(BuildNumber('lastStableBuild'))
        'lastStableBuild'
    '''

    __slots__ = ('_value',)

    def __init__(self, value):
        if isinstance(value, BuildNumber):
            value = value.value
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError('build number must be an int or a str, got %r'
                            % (value,))
        if isinstance(value, int) and not 0 <= value <= MAX_BUILD_NUMBER:
            raise ValueError('build number out of range: %d' % value)
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError('BuildNumber is immutable')

    @property
    def value(self):
        return self._value

    @property
    def is_number(self):
        return isinstance(self._value, int)

    @property
    def is_alias(self):
        '''True for the aliases known to this library.'''
        return self._value in ALIASES

    @property
    def is_unknown_alias(self):
        return not self.is_number and not self.is_alias

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return 'BuildNumber(%r)' % (self._value,)

    def __eq__(self, other):
        if not isinstance(other, BuildNumber):
            return NotImplemented
        return type(self._value) is type(other._value) and \
            self._value == other._value

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((BuildNumber, self._value))
