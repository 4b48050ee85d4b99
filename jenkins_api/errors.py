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
.. module:: jenkins_api.errors
    :platform: Unix, Windows
    :synopsis: Exceptions raised by the Jenkins client
'''

import enum


class JenkinsException(Exception):
    '''General exception type for jenkins-API-related failures.'''
    pass


class NotFoundException(JenkinsException):
    '''A special exception to call out the case of receiving a 404.'''
    pass


class EmptyResponseException(JenkinsException):
    '''A special exception to call out the case receiving an empty response.'''
    pass


class BadHTTPException(JenkinsException):
    '''A special exception to call out the case of a broken HTTP response.'''
    pass


class TimeoutException(JenkinsException):
    '''A special exception to call out in the case of a socket timeout.'''


class PathParseException(JenkinsException, ValueError):
    '''A URL has the shape of a known resource but a mandatory number in it
    could not be read.'''

    def __init__(self, url, segment, kind):
        super(PathParseException, self).__init__(
            'invalid %s number %r in url: %s' % (kind, segment, url))
        self.url = url
        self.segment = segment
        self.kind = kind


class ExpectedType(enum.Enum):
    '''Kind of resource a link between objects was expected to point at.'''

    BUILD = 'Build'
    JOB = 'Job'
    QUEUE_ITEM = 'QueueItem'
    VIEW = 'View'
    MAVEN_ARTIFACT_RECORD = 'MavenArtifactRecord'

    def __str__(self):
        return self.value


class InvalidUrlException(JenkinsException):
    '''A link between objects has an unexpected format.

    :param url: the link found in the object, ``str``
    :param expected: kind of resource the link should address,
        :class:`ExpectedType`
    '''

    def __init__(self, url, expected):
        super(InvalidUrlException, self).__init__(
            'invalid url for %s: %s' % (expected, url))
        self.url = url
        self.expected = expected
