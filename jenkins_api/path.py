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
.. module:: jenkins_api.path
    :platform: Unix, Windows
    :synopsis: Locations of Jenkins resources and their URL paths

Each resource of a Jenkins server is described by a small immutable object,
one class per kind of resource. Rendering one (``str(path)``) gives the
literal URL path the server expects, relative to the server URL::

    >>> str(Build('my job', 42))
    '/job/my%20job/42'
    >>> str(InFolder('folder', Build('my job', 'lastBuild')))
    '/job/folder/job/my%20job/lastBuild'

Names given by callers are wrapped in :class:`Name` and percent-encoded when
rendered, names read back from a URL are wrapped in :class:`UrlEncodedName`
and inserted untouched.
'''

from urllib.parse import quote

from jenkins_api import endpoints
from jenkins_api.build import BuildNumber

# Signed 32 bits, as reported by the server
MIN_QUEUE_ID = -2 ** 31
MAX_QUEUE_ID = 2 ** 31 - 1


class BaseName(object):
    '''Name of an object in a URL segment.'''

    __slots__ = ('_value',)

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError('%s value must be a str, got %r'
                            % (type(self).__name__, value))
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % type(self).__name__)

    @property
    def value(self):
        return self._value

    @property
    def segment(self):
        '''The name as it appears in a URL.'''
        raise NotImplementedError

    def __str__(self):
        return self.segment

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._value)

    # Names addressing the same URL segment are the same name
    def __eq__(self, other):
        if not isinstance(other, BaseName):
            return NotImplemented
        return self.segment == other.segment

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.segment)


class Name(BaseName):
    '''Name of an object, percent-encoded when rendered.'''

    __slots__ = ()

    @property
    def segment(self):
        return quote(self._value.encode('utf-8'), safe='')


class UrlEncodedName(BaseName):
    '''Name of an object taken from a URL, rendered verbatim.'''

    __slots__ = ()

    @property
    def segment(self):
        return self._value


def as_name(value):
    '''Wrap a plain ``str`` in a :class:`Name`, keep tagged names as they are.'''
    if isinstance(value, BaseName):
        return value
    if isinstance(value, str):
        return Name(value)
    raise TypeError('expected a name, got %r' % (value,))


NAME_FIELDS = frozenset(['name', 'job_name', 'view_name', 'configuration',
                         'folder_name'])


def _segments(*segments):
    return ''.join('/%s' % segment for segment in segments
                   if segment is not None)


class Path(object):
    '''Location of a resource on a Jenkins server.

    Subclasses list their identifying attributes in ``fields``, those which
    may be left out in ``optional``. Values are immutable and compare equal
    to values of the same class with equal fields.
    '''

    fields = ()
    optional = ()

    def __init__(self, *args, **kwargs):
        cls_name = type(self).__name__
        if len(args) > len(self.fields):
            raise TypeError('%s() takes at most %d arguments (%d given)'
                            % (cls_name, len(self.fields), len(args)))
        values = dict(zip(self.fields, args))
        for key, value in kwargs.items():
            if key not in self.fields:
                raise TypeError("%s() got an unexpected keyword argument '%s'"
                                % (cls_name, key))
            if key in values:
                raise TypeError("%s() got multiple values for argument '%s'"
                                % (cls_name, key))
            values[key] = value

        for field in self.fields:
            value = values.get(field)
            if value is not None:
                value = self._convert(field, value)
            elif field not in self.optional:
                raise TypeError("%s() missing required argument '%s'"
                                % (cls_name, field))
            object.__setattr__(self, field, value)
        self._validate()

    def _convert(self, field, value):
        if field in NAME_FIELDS:
            return as_name(value)
        if field == 'number':
            return BuildNumber(value)
        return value

    def _validate(self):
        pass

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def __delattr__(self, name):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def _values(self):
        return tuple(getattr(self, field) for field in self.fields)

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return type(self) is type(other) and self._values() == other._values()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((type(self),) + self._values())

    def __repr__(self):
        return '%s(%s)' % (
            type(self).__name__,
            ', '.join('%s=%r' % (field, getattr(self, field))
                      for field in self.fields))

    def render(self):
        '''Return the URL path of this resource, relative to the server.'''
        raise NotImplementedError

    def __str__(self):
        return self.render()


class Home(Path):

    def render(self):
        return ''


class View(Path):
    fields = ('name',)

    def render(self):
        return _segments(endpoints.VIEW, self.name)


class AddJobToView(Path):
    fields = ('job_name', 'view_name')

    def render(self):
        return '%s?name=%s' % (
            _segments(endpoints.VIEW, self.view_name,
                      endpoints.ADD_JOB_TO_VIEW),
            self.job_name)


class RemoveJobFromView(Path):
    fields = ('job_name', 'view_name')

    def render(self):
        return '%s?name=%s' % (
            _segments(endpoints.VIEW, self.view_name,
                      endpoints.REMOVE_JOB_FROM_VIEW),
            self.job_name)


class Job(Path):
    '''A job, or one configuration of a matrix job.'''

    fields = ('name', 'configuration')
    optional = ('configuration',)

    def render(self):
        return _segments(endpoints.JOB, self.name, self.configuration)


class _JobAction(Path):
    fields = ('name',)
    action = None

    def render(self):
        return _segments(endpoints.JOB, self.name, self.action)


class BuildJob(_JobAction):
    action = endpoints.BUILD


class BuildJobWithParameters(_JobAction):
    action = endpoints.BUILD_WITH_PARAMETERS


class PollSCMJob(_JobAction):
    action = endpoints.POLLING


class JobEnable(_JobAction):
    action = endpoints.ENABLE


class JobDisable(_JobAction):
    action = endpoints.DISABLE


class Build(Path):
    fields = ('job_name', 'number', 'configuration')
    optional = ('configuration',)

    def render(self):
        return _segments(endpoints.JOB, self.job_name, self.configuration,
                         self.number)


class ConsoleText(Path):
    '''Plain text console log of a build.

    ``folder_name`` addresses a job directly inside a folder, deeper nesting
    goes through :class:`InFolder`.
    '''

    fields = ('job_name', 'number', 'configuration', 'folder_name')
    optional = ('configuration', 'folder_name')

    def render(self):
        folder = ((endpoints.JOB, self.folder_name)
                  if self.folder_name is not None else ())
        return _segments(*(folder + (
            endpoints.JOB, self.job_name, self.configuration, self.number,
            endpoints.CONSOLE_TEXT)))


class ConfigXML(Path):
    fields = ('job_name', 'folder_name')
    optional = ('folder_name',)

    def render(self):
        folder = ((endpoints.JOB, self.folder_name)
                  if self.folder_name is not None else ())
        return _segments(*(folder + (
            endpoints.JOB, self.job_name, endpoints.CONFIG_XML)))


class Queue(Path):

    def render(self):
        return _segments(endpoints.QUEUE)


class QueueItem(Path):
    fields = ('id',)

    def _convert(self, field, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError('queue item id must be an int, got %r' % (value,))
        if not MIN_QUEUE_ID <= value <= MAX_QUEUE_ID:
            raise ValueError('queue item id out of range: %d' % value)
        return value

    def render(self):
        return _segments(endpoints.QUEUE, endpoints.QUEUE_ITEM, self.id)


class MavenArtifactRecord(Path):
    fields = ('job_name', 'number', 'configuration')
    optional = ('configuration',)

    def render(self):
        return _segments(endpoints.JOB, self.job_name, self.configuration,
                         self.number, endpoints.MAVEN_ARTIFACTS)


class Computers(Path):

    def render(self):
        return _segments(endpoints.COMPUTER)


class Computer(Path):
    fields = ('name',)

    def render(self):
        return _segments(endpoints.COMPUTER, self.name)


class Raw(Path):
    '''Any path, kept as it is.'''

    fields = ('path',)

    def _convert(self, field, value):
        if not isinstance(value, str):
            raise TypeError('raw path must be a str, got %r' % (value,))
        return value

    def render(self):
        return self.path


class CrumbIssuer(Path):

    def render(self):
        return _segments(endpoints.CRUMB_ISSUER)


# Folders hold jobs, everything addressable under /job/<folder>/
FOLDER_CONTENT = (Job, _JobAction, Build, ConsoleText, ConfigXML,
                  MavenArtifactRecord)


class InFolder(Path):
    '''A path nested in a folder.

    Folders of folders are nested ``InFolder`` values, outermost first.
    '''

    fields = ('folder_name', 'path')

    def _convert(self, field, value):
        if field == 'path':
            if not isinstance(value, Path):
                raise TypeError('InFolder path must be a Path, got %r'
                                % (value,))
            return value
        return super(InFolder, self)._convert(field, value)

    def _validate(self):
        if not isinstance(self.path, FOLDER_CONTENT + (InFolder,)):
            raise ValueError('%s can not be located in a folder'
                             % type(self.path).__name__)

    def render(self):
        return _segments(endpoints.JOB, self.folder_name) + self.path.render()


def split_folders(path):
    '''Unwrap the folders around a path.

    :param path: any :class:`Path`
    :returns: tuple of the list of folder names, outermost first, and the
        innermost path
    '''
    folders = []
    while isinstance(path, InFolder):
        folders.append(path.folder_name)
        path = path.path
    return folders, path


def in_folders(folders, path):
    '''Wrap a path in folders, the reverse of :func:`split_folders`.'''
    for folder_name in reversed(folders):
        path = InFolder(folder_name, path)
    return path


def split_full_name(full_name):
    '''Split a full job name like ``'folder/sub/job'``.

    :returns: tuple of the list of folder names and the short job name
    '''
    parts = full_name.split('/')
    return parts[:-1], parts[-1]


def job_path(full_name, configuration=None):
    '''Path of a job given its full name, folders separated by ``/``.'''
    folders, short_name = split_full_name(full_name)
    return in_folders(folders, Job(short_name, configuration))
