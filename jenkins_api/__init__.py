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
.. module:: jenkins_api
    :platform: Unix, Windows
    :synopsis: Python API to interact with Jenkins through typed resource paths

Resources are addressed with :mod:`jenkins_api.path` objects, links found in
the JSON returned by Jenkins are read back with :func:`url_to_path`, and the
amount of data returned is controlled with ``depth`` or with a
:class:`TreeQuery` built by :class:`TreeBuilder`.
'''

import json
import logging
import os
import socket
from urllib.parse import urlencode, urlparse

import requests
import requests.exceptions as req_exc
from requests.packages.urllib3.exceptions import InsecureRequestWarning

from jenkins_api import endpoints
from jenkins_api.build import ALIASES  # noqa: F401
from jenkins_api.build import BuildNumber  # noqa: F401
from jenkins_api.errors import BadHTTPException
from jenkins_api.errors import EmptyResponseException
from jenkins_api.errors import ExpectedType
from jenkins_api.errors import InvalidUrlException
from jenkins_api.errors import JenkinsException
from jenkins_api.errors import NotFoundException
from jenkins_api.errors import PathParseException  # noqa: F401
from jenkins_api.errors import TimeoutException
from jenkins_api import parser
from jenkins_api.path import AddJobToView
from jenkins_api.path import Build
from jenkins_api.path import BuildJob
from jenkins_api.path import BuildJobWithParameters
from jenkins_api.path import Computer
from jenkins_api.path import Computers
from jenkins_api.path import ConfigXML
from jenkins_api.path import ConsoleText
from jenkins_api.path import CrumbIssuer
from jenkins_api.path import Home
from jenkins_api.path import in_folders
from jenkins_api.path import InFolder  # noqa: F401
from jenkins_api.path import Job
from jenkins_api.path import job_path
from jenkins_api.path import JobDisable
from jenkins_api.path import JobEnable
from jenkins_api.path import MavenArtifactRecord
from jenkins_api.path import Name  # noqa: F401
from jenkins_api.path import Path  # noqa: F401
from jenkins_api.path import PollSCMJob
from jenkins_api.path import Queue
from jenkins_api.path import QueueItem
from jenkins_api.path import Raw
from jenkins_api.path import RemoveJobFromView
from jenkins_api.path import split_folders
from jenkins_api.path import split_full_name
from jenkins_api.path import UrlEncodedName  # noqa: F401
from jenkins_api.path import View
from jenkins_api.tree import as_tree
from jenkins_api.tree import TreeBuilder  # noqa: F401
from jenkins_api.tree import TreeQuery  # noqa: F401

try:
    import requests_kerberos
except ImportError:
    requests_kerberos = None

logger = logging.getLogger(__name__)
# Set default logging handler to avoid "No handler found" warnings.
logger.addHandler(logging.NullHandler())

url_to_path = parser.url_to_path


def _nested(name, make_path):
    '''Path of a job resource given the full job name, ``folder/job``.'''
    folders, short_name = split_full_name(name)
    return in_folders(folders, make_path(short_name))


def _nested_with_folder(name, make_path):
    '''Same as :func:`_nested`, the innermost folder is handed to
    ``make_path`` for paths with a ``folder_name`` field.'''
    folders, short_name = split_full_name(name)
    folder_name = folders.pop() if folders else None
    return in_folders(folders, make_path(short_name, folder_name))


class WrappedSession(requests.Session):
    """A wrapper for requests.Session to override 'verify' property, ignoring REQUESTS_CA_BUNDLE environment variable.

    This is a workaround for https://github.com/kennethreitz/requests/issues/3829 (will be fixed in requests 3.0.0)
    """

    def merge_environment_settings(self, url, proxies, stream, verify, *args,
                                   **kwargs):
        if self.verify is False:
            verify = False

        return super(WrappedSession, self).merge_environment_settings(url,
                                                                      proxies,
                                                                      stream,
                                                                      verify,
                                                                      *args,
                                                                      **kwargs)


class Jenkins(object):

    def __init__(self, url, username=None, password=None,
                 timeout=socket._GLOBAL_DEFAULT_TIMEOUT, depth=1, csrf=True):
        '''Create handle to Jenkins instance.

        All methods will raise :class:`JenkinsException` on failure.

        :param url: URL of Jenkins server, ``str``
        :param username: Server username, ``str``
        :param password: Server password, ``str``
        :param timeout: Server connection timeout in secs (default: not set), ``int``
        :param depth: Default ``depth`` of JSON API requests (default: 1), ``int``
        :param csrf: Send a CSRF crumb with requests (default: True), ``bool``
        '''
        parsed = urlparse(url)
        if not parsed.scheme or not parsed.netloc:
            raise JenkinsException('invalid url: %s' % url)
        # paths are rendered with a leading slash
        self.server = url.rstrip('/')

        self._auths = [('anonymous', None)]
        self._auth_resolved = False
        if username is not None and password is not None:
            self._auths[0] = (
                'basic',
                requests.auth.HTTPBasicAuth(
                    username.encode('utf-8'), password.encode('utf-8'))
            )

        if requests_kerberos is not None:
            self._auths.append(
                ('kerberos', requests_kerberos.HTTPKerberosAuth())
            )

        self.auth = None
        self.crumb = None
        self.csrf = csrf
        self.depth = depth
        self.timeout = timeout
        self._session = WrappedSession()

        extra_headers = os.environ.get("JENKINS_API_EXTRA_HEADERS", "")
        if extra_headers:
            logger.warning("JENKINS_API_EXTRA_HEADERS adds these HTTP headers: %s", extra_headers.split("\n"))
        for token in extra_headers.split("\n"):
            if ":" in token:
                header, value = token.split(":", 1)
                self._session.headers[header] = value.strip()

        if os.getenv('PYTHONHTTPSVERIFY', '1') == '0':
            logger.debug('PYTHONHTTPSVERIFY=0 detected so we will '
                         'disable requests library SSL verification to keep '
                         'compatibility with older versions.')
            requests.packages.urllib3.disable_warnings(InsecureRequestWarning)
            self._session.verify = False

    def url_to_path(self, url):
        '''Find the resource a URL of this server addresses.

        :param url: URL found in an object returned by Jenkins, ``str``
        :returns: :class:`Path`
        '''
        return parser.url_to_path(url, self.server)

    def _build_url(self, path, query=None):
        url = self.server + str(path)
        if query:
            url += ('&' if '?' in url else '?') + urlencode(query)
        return url

    def _build_api_url(self, path, depth=None, tree=None):
        '''URL of the JSON API of ``path``.

        Exactly one of ``depth`` and ``tree`` is sent, ``depth`` defaulting
        to the one given at construction.
        '''
        if depth is not None and tree is not None:
            raise JenkinsException('depth and tree can not be used together')
        if tree is not None:
            query = [('tree', str(as_tree(tree)))]
        else:
            query = [('depth', self.depth if depth is None else depth)]
        return '%s%s?%s' % (self._build_url(path), endpoints.API_JSON,
                            urlencode(query, safe='[]{},'))

    def maybe_add_crumb(self, req):
        if not self.csrf or req.method == 'GET':
            return
        # We don't know yet whether we need a crumb
        if self.crumb is None:
            try:
                response = self.jenkins_open(requests.Request(
                    'GET', self._build_api_url(CrumbIssuer())),
                    add_crumb=False)
            except (NotFoundException, EmptyResponseException):
                logger.debug('no crumb issuer on server[%s]', self.server)
                self.crumb = False
            else:
                self.crumb = json.loads(response) if response else False
        if self.crumb:
            req.headers[self.crumb['crumbRequestField']] = self.crumb['crumb']

    def _maybe_add_auth(self):

        if self._auth_resolved:
            return

        if len(self._auths) == 1:
            # If we only have one auth mechanism specified, just require it
            self._session.auth = self._auths[0][1]
        else:
            # Attempt the list of auth mechanisms and keep the first that works
            # otherwise default to the first one in the list (last popped).
            failures = []
            for name, auth in reversed(self._auths):
                try:
                    self.jenkins_open(
                        requests.Request('GET',
                                         self._build_api_url(Home(), depth=0),
                                         auth=auth),
                        add_crumb=False, resolve_auth=False)
                    self._session.auth = auth
                    break
                except TimeoutException:
                    raise
                except Exception as exc:
                    # assume authentication failure
                    failures.append("auth(%s) %s" % (name, exc))
                    continue
            else:
                raise JenkinsException(
                    'Unable to authenticate with any scheme:\n%s'
                    % '\n'.join(failures))

        self._auth_resolved = True
        self.auth = self._session.auth

    def _response_handler(self, response):
        '''Handle response objects'''

        # raise exceptions if occurred
        response.raise_for_status()

        headers = response.headers
        if (headers.get('content-length') is None and
                headers.get('transfer-encoding') is None and
                headers.get('location') is None and
                (response.content is None or len(response.content) <= 0)):
            # response body should only exist if one of these is provided
            raise EmptyResponseException(
                "Error communicating with server[%s]: "
                "empty response" % self.server)

        return response

    def _request(self, req):

        r = self._session.prepare_request(req)
        logger.debug('sending %s %s', r.method, r.url)
        # requests.Session.send() does not honor env settings by design
        # see https://github.com/requests/requests/issues/2807
        _settings = self._session.merge_environment_settings(
            r.url, {}, None, self._session.verify, None)
        _settings['timeout'] = self.timeout
        return self._session.send(r, **_settings)

    def jenkins_open(self, req, add_crumb=True, resolve_auth=True):
        '''Return the HTTP response body from a ``requests.Request``.

        :returns: ``str``
        '''
        return self.jenkins_request(req, add_crumb, resolve_auth).text

    def jenkins_request(self, req, add_crumb=True, resolve_auth=True):
        '''Utility routine for opening an HTTP request to a Jenkins server.

        :param req: A ``requests.Request`` to submit.
        :param add_crumb: If True, try to add a crumb header to this ``req``
                          before submitting. Defaults to ``True``.
        :param resolve_auth: If True, maybe add authentication. Defaults to
                             ``True``.
        :returns: A ``requests.Response`` object.
        '''
        try:
            if resolve_auth:
                self._maybe_add_auth()
            if add_crumb:
                self.maybe_add_crumb(req)

            return self._response_handler(
                self._request(req))

        except req_exc.HTTPError as e:
            # Jenkins's funky authentication means its nigh impossible to
            # distinguish errors.
            if e.response.status_code in [401, 403, 500]:
                msg = 'Error in request. ' + \
                      'Possibly authentication failed [%s]: %s' % (
                          e.response.status_code, e.response.reason)
                if e.response.text:
                    msg += '\n' + e.response.text
                raise JenkinsException(msg)
            elif e.response.status_code == 404:
                raise NotFoundException('Requested item could not be found')
            else:
                raise
        except req_exc.Timeout as e:
            raise TimeoutException('Error in request: %s' % (e))

    def _get_json(self, path, description, depth=None, tree=None):
        url = self._build_api_url(path, depth, tree)
        try:
            response = self.jenkins_open(requests.Request('GET', url))
            if response:
                return json.loads(response)
            else:
                raise JenkinsException('%s does not exist' % description)
        except (req_exc.HTTPError, NotFoundException):
            raise JenkinsException('%s does not exist' % description)
        except ValueError:
            raise JenkinsException(
                'Could not parse JSON info for %s' % description)

    def _post(self, path, **kwargs):
        return self.jenkins_request(requests.Request(
            'POST', self._build_url(path), **kwargs))

    def get_object(self, path, depth=None, tree=None):
        '''Get the JSON API of any resource.

        :param path: resource to get, :class:`Path`
        :param depth: JSON depth, ``int``
        :param tree: fields to return, :class:`TreeQuery`,
            :class:`TreeBuilder` or ``str``. Can not be used with ``depth``.
        :returns: dictionary of the resource information, ``dict``

        Example::

            >>> tree = TreeBuilder().with_field('displayName').with_field(
            ...     TreeBuilder.object('lastBuild').with_subfield('number'))
            >>> server.get_object(Job('my_job'), tree=tree.build())
            {u'displayName': u'my_job', u'lastBuild': {u'number': 87}}
        '''
        return self._get_json(path, 'object[%s]' % (str(path) or '/'),
                              depth, tree)

    def get_home(self, depth=None, tree=None):
        '''Get information on this Master: jobs, views, mode...

        :param depth: JSON depth, ``int``
        :param tree: fields to return, :class:`TreeQuery`
        :returns: dictionary of information about Master, ``dict``
        '''
        try:
            return json.loads(self.jenkins_open(requests.Request(
                'GET', self._build_api_url(Home(), depth, tree))))
        except (req_exc.HTTPError, req_exc.ConnectionError):
            raise BadHTTPException("Error communicating with server[%s]"
                                   % self.server)
        except ValueError:
            raise JenkinsException("Could not parse JSON info for server[%s]"
                                   % self.server)

    def get_version(self):
        """Get the version of this Master.

        :returns: This master's version number ``str``
        """
        try:
            request = requests.Request('GET', self._build_url(Home()) + '/')
            request.headers['X-Jenkins'] = '0.0'
            response = self._response_handler(self._request(request))

            return response.headers['X-Jenkins']

        except (req_exc.HTTPError, req_exc.ConnectionError):
            raise BadHTTPException("Error communicating with server[%s]"
                                   % self.server)

    def get_job(self, name, depth=None, tree=None):
        '''Get job information dictionary.

        :param name: Job name, folders separated by ``/``, ``str``
        :param depth: JSON depth, ``int``
        :param tree: fields to return, :class:`TreeQuery`
        :returns: dictionary of job information
        '''
        return self._get_json(job_path(name), 'job[%s]' % name, depth, tree)

    def get_build(self, name, number, depth=None, tree=None):
        '''Get build information dictionary.

        :param name: Job name, ``str``
        :param number: Build number or alias such as ``lastBuild``,
            ``int`` or ``str``
        :param depth: JSON depth, ``int``
        :param tree: fields to return, :class:`TreeQuery`
        :returns: dictionary of build information, ``dict``
        '''
        path = _nested(name, lambda short_name: Build(short_name, number))
        return self._get_json(path, 'job[%s] number[%s]' % (name, number),
                              depth, tree)

    def get_build_console_output(self, name, number):
        '''Get build console text.

        :param name: Job name, ``str``
        :param number: Build number or alias, ``int`` or ``str``
        :returns: Build console output,  ``str``
        '''
        path = _nested_with_folder(
            name, lambda short_name, folder_name: ConsoleText(
                short_name, number, folder_name=folder_name))
        return self._get_text(path, 'job[%s] number[%s]' % (name, number))

    def get_job_config(self, name):
        '''Get configuration of existing Jenkins job.

        :param name: Name of Jenkins job, ``str``
        :returns: job configuration (XML format)
        '''
        path = _nested_with_folder(name, ConfigXML)
        return self._get_text(path, 'job[%s]' % name)

    def _get_text(self, path, description):
        try:
            response = self.jenkins_open(requests.Request(
                'GET', self._build_url(path)))
            if response:
                return response
            else:
                raise JenkinsException('%s does not exist' % description)
        except (req_exc.HTTPError, NotFoundException):
            raise JenkinsException('%s does not exist' % description)

    def _queue_item_id(self, response):
        if 'Location' not in response.headers:
            raise EmptyResponseException(
                "Header 'Location' not found in "
                "response from server[%s]" % self.server)

        # location is a queue item, eg. "http://jenkins/queue/item/25/"
        location = response.headers['Location']
        path = self.url_to_path(location)
        if isinstance(path, Raw):
            # Jenkins writes its own root url, which may name another host
            path = parser.url_to_path(urlparse(location).path,
                                      urlparse(self.server).path)
        if not isinstance(path, QueueItem):
            raise InvalidUrlException(location, ExpectedType.QUEUE_ITEM)
        return path.id

    def build_job(self, name):
        '''Trigger build job.

        This method returns a queue item number that you can pass to
        :meth:`Jenkins.get_queue_item`. Note that this queue number is only
        valid for about five minutes after the job completes, so you should
        get/poll the queue information as soon as possible to determine the
        job's URL.

        :param name: name of job
        :returns: ``int`` queue item
        '''
        return self._queue_item_id(self._post(_nested(name, BuildJob)))

    def build_job_with_parameters(self, name, parameters):
        '''Trigger build job with parameters.

        :param name: name of job
        :param parameters: parameters for job, ``dict`` or ``list of two
            membered tuples``
        :returns: ``int`` queue item
        '''
        return self._queue_item_id(self._post(
            _nested(name, BuildJobWithParameters),
            data=urlencode(parameters).encode('utf-8'),
            headers=endpoints.FORM_HEADERS))

    def trigger_job_remotely(self, name, token, cause=None):
        '''Trigger build job with the authentication token configured on the
        job, without user credentials.

        :param name: name of job
        :param token: token configured in the job, ``str``
        :param cause: text added to the build cause, ``str``
        :returns: ``int`` queue item
        '''
        query = [('token', token)]
        if cause is not None:
            query.append(('cause', cause))
        response = self.jenkins_request(requests.Request(
            'GET', self._build_url(_nested(name, BuildJob), query)))
        return self._queue_item_id(response)

    def poll_scm_job(self, name):
        '''Ask a job to poll its SCM for changes.

        :param name: Name of Jenkins job, ``str``
        '''
        self._post(_nested(name, PollSCMJob))

    def enable_job(self, name):
        '''Enable Jenkins job.

        :param name: Name of Jenkins job, ``str``
        '''
        self._post(_nested(name, JobEnable))

    def disable_job(self, name):
        '''Disable Jenkins job.

        To re-enable, call :meth:`Jenkins.enable_job`.

        :param name: Name of Jenkins job, ``str``
        '''
        self._post(_nested(name, JobDisable))

    def get_view(self, name, depth=None, tree=None):
        '''Get view information dictionary, with the jobs of the view.

        :param name: Name of Jenkins view, ``str``
        :returns: dictionary of view information, ``dict``
        '''
        return self._get_json(View(name), 'view[%s]' % name, depth, tree)

    def add_job_to_view(self, view_name, job_name):
        '''Add a job to a list view.

        :param view_name: Name of Jenkins view, ``str``
        :param job_name: Name of Jenkins job, ``str``
        '''
        self._post(AddJobToView(job_name, view_name))

    def remove_job_from_view(self, view_name, job_name):
        '''Remove a job from a list view.

        :param view_name: Name of Jenkins view, ``str``
        :param job_name: Name of Jenkins job, ``str``
        '''
        self._post(RemoveJobFromView(job_name, view_name))

    def get_queue(self):
        ''':returns: list of queued items, ``[dict]``'''
        return self._get_json(Queue(), 'queue')['items']

    def get_queue_item(self, number, depth=None, tree=None):
        '''Get information about a queued item (to-be-created job).

        The returned dict will have a "why" key if the queued item is still
        waiting for an executor.

        The returned dict will have an "executable" key if the queued item is
        running on an executor, or has completed running. Use
        :meth:`Jenkins.get_queue_item_build` to get the build.

        :param number: queue number, ``int``
        :returns: dictionary of queued information, ``dict``
        '''
        return self._get_json(QueueItem(number),
                              'queue number[%d]' % number, depth, tree)

    def get_nodes(self, depth=None, tree=None):
        '''Get the nodes connected to the Master, under the ``computer`` key.

        :returns: dictionary of the node set, ``dict``
        '''
        return self._get_json(Computers(), 'nodes', depth, tree)

    def get_node(self, name, depth=None, tree=None):
        '''Get node information dictionary

        :param name: Node name, ``str``
        :returns: Dictionary of node info, ``dict``
        '''
        return self._get_json(Computer(name), 'node[%s]' % name, depth, tree)

    def get_master_node(self, depth=None, tree=None):
        return self.get_node(endpoints.MASTER_NODE, depth, tree)

    def _follow(self, record, expected, kinds):
        '''Read the ``url`` field of a record returned by Jenkins.

        :returns: tuple of the folders around the resource and the resource
            path itself
        :throws: :class:`InvalidUrlException` when the link is not one of
            ``kinds``
        '''
        url = record.get('url', '')
        folders, path = split_folders(self.url_to_path(url))
        if not isinstance(path, kinds):
            raise InvalidUrlException(url, expected)
        return folders, path

    def get_full_job(self, job, depth=None, tree=None):
        '''Get the full information of a job listed in another object, such
        as the ``jobs`` of a view.

        :param job: job record with a ``url`` key, ``dict``
        :returns: dictionary of job information, ``dict``
        '''
        folders, path = self._follow(job, ExpectedType.JOB, Job)
        return self._get_json(in_folders(folders, path),
                              'job[%s]' % job['url'], depth, tree)

    def get_full_build(self, build, depth=None, tree=None):
        '''Get the full information of a build listed in another object,
        such as ``lastBuild`` or ``builds`` of a job.

        :param build: build record with a ``url`` key, ``dict``
        :returns: dictionary of build information, ``dict``
        '''
        folders, path = self._follow(build, ExpectedType.BUILD, Build)
        return self._get_json(in_folders(folders, path),
                              'build[%s]' % build['url'], depth, tree)

    def get_full_view(self, view, depth=None, tree=None):
        '''Get the full information of a view listed in another object, such
        as the ``views`` of the Master.

        :param view: view record with a ``url`` key, ``dict``
        :returns: dictionary of view information, ``dict``
        '''
        _, path = self._follow(view, ExpectedType.VIEW, View)
        return self._get_json(path, 'view[%s]' % view['url'], depth, tree)

    def get_full_queue_item(self, queue_item, depth=None, tree=None):
        '''Get the full information of a queue item, also used to refresh
        a queue item already fetched.

        :param queue_item: queue item record with a ``url`` key, ``dict``
        :returns: dictionary of queued information, ``dict``
        '''
        _, path = self._follow(queue_item, ExpectedType.QUEUE_ITEM,
                               QueueItem)
        return self._get_json(path, 'queue number[%d]' % path.id,
                              depth, tree)

    def get_full_maven_artifact_record(self, record, depth=None, tree=None):
        folders, path = self._follow(
            record, ExpectedType.MAVEN_ARTIFACT_RECORD, MavenArtifactRecord)
        return self._get_json(in_folders(folders, path),
                              'maven artifacts[%s]' % record['url'],
                              depth, tree)

    def get_build_job(self, build, depth=None, tree=None):
        '''Get the job a build belongs to.

        For a run of a matrix configuration this is the configuration.

        :param build: build record with a ``url`` key, ``dict``
        :returns: dictionary of job information, ``dict``
        '''
        folders, path = self._follow(build, ExpectedType.BUILD, Build)
        job = in_folders(folders, Job(path.job_name, path.configuration))
        return self._get_json(job, 'job[%s]' % str(job), depth, tree)

    def get_build_console(self, build):
        '''Get the console text of a build.

        :param build: build record with a ``url`` key, ``dict``
        :returns: Build console output, ``str``
        '''
        folders, path = self._follow(build, ExpectedType.BUILD, Build)
        folder_name = folders.pop() if folders else None
        console = in_folders(folders, ConsoleText(
            path.job_name, path.number, path.configuration, folder_name))
        return self._get_text(console, 'build[%s]' % build['url'])

    def get_maven_artifact_record(self, build, depth=None, tree=None):
        '''Get the maven artifacts produced by a build of a maven job.

        :param build: build record with a ``url`` key, ``dict``
        :returns: dictionary of artifact records, ``dict``
        '''
        folders, path = self._follow(build, ExpectedType.BUILD, Build)
        record = in_folders(folders, MavenArtifactRecord(
            path.job_name, path.number, path.configuration))
        return self._get_json(record, 'maven artifacts[%s]' % build['url'],
                              depth, tree)

    def get_queue_item_build(self, queue_item, depth=None, tree=None):
        '''Get the build started from a queue item.

        :param queue_item: queue item information, ``dict``
        :returns: dictionary of build information, ``dict``
        :throws: :class:`JenkinsException` while the item waits in the queue
        '''
        executable = queue_item.get('executable')
        if not executable:
            raise JenkinsException('queue number[%s] has no build yet'
                                   % queue_item.get('id'))
        return self.get_full_build(executable, depth, tree)
