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
.. module:: jenkins_api.parser
    :platform: Unix, Windows
    :synopsis: Read Jenkins URLs back into resource paths

Jenkins objects link to each other by URL (the ``url`` field of jobs,
builds, views and queue items). :func:`url_to_path` turns such a URL back
into a :class:`jenkins_api.path.Path` so that a follow-up request can be
built from it.

The URL grammar is ambiguous: ``/job/<A>/<B>/`` is a build when ``<B>`` reads
as a number and a configuration of a matrix job otherwise. A configuration
whose name is only digits is therefore read as a build.
'''

import logging
import re

from jenkins_api import endpoints
from jenkins_api.build import BuildNumber
from jenkins_api.build import parse_number
from jenkins_api.errors import PathParseException
from jenkins_api import path as paths

logger = logging.getLogger(__name__)

_SIGNED_DIGITS = re.compile(r'^-?[0-9]+\Z')


def _strip_base_url(url, base_url):
    if base_url:
        base_url = base_url.rstrip('/')
        rest = url[len(base_url):]
        if url.startswith(base_url) and (not rest or rest.startswith('/')):
            return rest
    return url


def _queue_id(url, segment):
    if not _SIGNED_DIGITS.match(segment):
        raise PathParseException(url, segment, 'queue item')
    queue_id = int(segment)
    if not paths.MIN_QUEUE_ID <= queue_id <= paths.MAX_QUEUE_ID:
        raise PathParseException(url, segment, 'queue item')
    return queue_id


def _build_number(url, segment):
    number = parse_number(segment)
    if number is None:
        raise PathParseException(url, segment, 'build')
    return BuildNumber(number)


def _parse_job(path, segments):
    '''Parse the segments of a path starting with ``/job/``.

    :returns: a :class:`Path`, or ``None`` when the shape is not known
    '''
    name = paths.UrlEncodedName(segments[1])
    count = len(segments)

    if count == 2:
        return paths.Job(name)

    if count == 3:
        number = parse_number(segments[2])
        if number is not None:
            return paths.Build(name, number)
        return paths.Job(name, paths.UrlEncodedName(segments[2]))

    if segments[2] == endpoints.JOB:
        nested = _parse_job(path, segments[2:])
        if nested is None:
            return None
        return paths.InFolder(name, nested)

    if count == 4:
        if segments[3] == endpoints.MAVEN_ARTIFACTS:
            return paths.MavenArtifactRecord(
                name, _build_number(path, segments[2]))
        number = parse_number(segments[3])
        if number is not None:
            return paths.Build(name, number,
                               paths.UrlEncodedName(segments[2]))
        return None

    if count == 5 and segments[4] == endpoints.MAVEN_ARTIFACTS:
        return paths.MavenArtifactRecord(
            name, _build_number(path, segments[3]),
            paths.UrlEncodedName(segments[2]))

    return None


def _parse(path):
    if path in ('', '/'):
        return paths.Home()

    # leading and trailing slashes are both mandatory
    if not path.startswith('/') or not path.endswith('/'):
        return None
    segments = path[1:-1].split('/')
    if not all(segments):
        return None

    keyword, count = segments[0], len(segments)
    if keyword == endpoints.JOB and count >= 2:
        return _parse_job(path, segments)
    if keyword == endpoints.VIEW and count == 2:
        return paths.View(paths.UrlEncodedName(segments[1]))
    if keyword == endpoints.QUEUE:
        if count == 1:
            return paths.Queue()
        if count == 3 and segments[1] == endpoints.QUEUE_ITEM:
            return paths.QueueItem(_queue_id(path, segments[2]))
    if keyword == endpoints.COMPUTER:
        if count == 1:
            return paths.Computers()
        if count == 2:
            return paths.Computer(paths.UrlEncodedName(segments[1]))
    if keyword == endpoints.CRUMB_ISSUER and count == 1:
        return paths.CrumbIssuer()
    return None


def url_to_path(url, base_url=None):
    '''Find the resource a Jenkins URL addresses.

    :param url: absolute URL, or path relative to the server, ``str``
    :param base_url: URL of the Jenkins server, stripped from the start of
        ``url`` when it matches, ``str``
    :returns: the matching :class:`jenkins_api.path.Path`, a
        :class:`jenkins_api.path.Raw` one when the URL has no known shape
    :throws: :class:`jenkins_api.errors.PathParseException` when the URL has
        the shape of a queue item or maven artifact record with an invalid
        number in it

    Example::

        >>> url_to_path('http://jenkins/job/folder1/job/foo/3/',
        ...             'http://jenkins')
        InFolder(folder_name=UrlEncodedName('folder1'), path=Build(...))
    '''
    path = _strip_base_url(url, base_url)

    # queue items are reported as 'queue/item/25/'
    candidate = path
    if candidate and not candidate.startswith('/') and '://' not in candidate:
        candidate = '/' + candidate

    result = _parse(candidate)
    if result is None:
        logger.debug('unrecognized url %s, keeping it as is', url)
        return paths.Raw(path)
    return result
