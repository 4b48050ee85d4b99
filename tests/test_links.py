import json

from mock import patch

import jenkins_api
from tests.base import JenkinsTestBase


class JenkinsFullJobTest(JenkinsTestBase):

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_simple(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({u'name': u'my job'})
        job = {u'name': u'my job', u'url': self.make_url('job/my%20job/')}

        self.assertEqual(self.j.get_full_job(job), {u'name': u'my job'})
        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/my%20job/api/json?depth=1'))
        self._check_requests(jenkins_mock.call_args_list)

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_in_folders(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({})
        job = {u'url': self.make_url('job/top/job/sub/job/foo/')}

        self.j.get_full_job(job, depth=2)

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/top/job/sub/job/foo/api/json?depth=2'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_wrong_kind(self, jenkins_mock):
        url = self.make_url('job/foo/3/')

        with self.assertRaises(jenkins_api.InvalidUrlException) as context_manager:
            self.j.get_full_job({u'url': url})
        self.assertEqual(str(context_manager.exception),
                         'invalid url for Job: %s' % url)
        self.assertFalse(jenkins_mock.called)

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_no_url(self, jenkins_mock):
        with self.assertRaises(jenkins_api.InvalidUrlException):
            self.j.get_full_job({u'name': u'foo'})


class JenkinsFullBuildTest(JenkinsTestBase):

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_tree_builder(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({u'result': u'SUCCESS'})
        build = {u'url': self.make_url('job/foo/3/')}
        tree = jenkins_api.TreeBuilder().with_field('result')

        self.j.get_full_build(build, tree=tree)

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/foo/3/api/json?tree=result'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_simple(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({u'number': 3})
        build = {u'number': 3, u'url': self.make_url('job/foo/3/')}

        self.assertEqual(self.j.get_full_build(build), {u'number': 3})
        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/foo/3/api/json?depth=1'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_configuration(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({})
        build = {u'url': self.make_url('job/matrix/label=linux/7/')}

        self.j.get_full_build(build, tree='result')

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/matrix/label=linux/7/api/json?tree=result'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_in_folder(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({})
        build = {u'url': self.make_url('job/folder1/job/foo/3/')}

        self.j.get_full_build(build)

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/folder1/job/foo/3/api/json?depth=1'))

    def test_malformed_url(self):
        url = self.make_url('job/foo/x/mavenArtifacts/')

        with self.assertRaises(jenkins_api.PathParseException):
            self.j.get_full_build({u'url': url})

    def test_wrong_kind(self):
        url = self.make_url('view/foo/')

        with self.assertRaises(jenkins_api.InvalidUrlException) as context_manager:
            self.j.get_full_build({u'url': url})
        self.assertEqual(context_manager.exception.expected,
                         jenkins_api.ExpectedType.BUILD)


class JenkinsFullViewTest(JenkinsTestBase):

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_simple(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({u'name': u'All'})
        view = {u'name': u'All', u'url': self.make_url('view/All/')}

        self.assertEqual(self.j.get_full_view(view), {u'name': u'All'})
        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('view/All/api/json?depth=1'))

    def test_home_url(self):
        # the default view is reported with the url of the server
        with self.assertRaises(jenkins_api.InvalidUrlException) as context_manager:
            self.j.get_full_view({u'url': self.make_url('')})
        self.assertEqual(context_manager.exception.expected,
                         jenkins_api.ExpectedType.VIEW)


class JenkinsFullQueueItemTest(JenkinsTestBase):

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_refresh(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({u'id': 25, u'why': None})
        item = {u'id': 25, u'url': u'queue/item/25/'}

        self.assertEqual(self.j.get_full_queue_item(item),
                         {u'id': 25, u'why': None})
        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('queue/item/25/api/json?depth=1'))

    def test_out_of_range(self):
        with self.assertRaises(jenkins_api.PathParseException):
            self.j.get_full_queue_item({u'url': u'queue/item/2147483648/'})


class JenkinsBuildLinksTest(JenkinsTestBase):

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_build_job(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({u'name': u'foo'})
        build = {u'url': self.make_url('job/folder1/job/foo/3/')}

        self.j.get_build_job(build)

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/folder1/job/foo/api/json?depth=1'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_build_job_configuration(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({})
        build = {u'url': self.make_url('job/matrix/label=linux/7/')}

        self.j.get_build_job(build)

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/matrix/label=linux/api/json?depth=1'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_build_console(self, jenkins_mock):
        jenkins_mock.return_value = 'Started by user admin'
        build = {u'url': self.make_url('job/top/job/folder1/job/foo/3/')}

        self.assertEqual(self.j.get_build_console(build),
                         'Started by user admin')
        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/top/job/folder1/job/foo/3/consoleText'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_build_console_configuration(self, jenkins_mock):
        jenkins_mock.return_value = 'Started by upstream project'
        build = {u'url': self.make_url('job/matrix/label=linux/7/')}

        self.j.get_build_console(build)

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/matrix/label=linux/7/consoleText'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_maven_artifact_record(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({u'moduleRecords': []})
        build = {u'url': self.make_url('job/maven/12/')}

        self.assertEqual(self.j.get_maven_artifact_record(build),
                         {u'moduleRecords': []})
        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/maven/12/mavenArtifacts/api/json?depth=1'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_full_maven_artifact_record(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({u'moduleRecords': []})
        record = {u'url': self.make_url('job/maven/12/mavenArtifacts/')}

        self.j.get_full_maven_artifact_record(record)

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/maven/12/mavenArtifacts/api/json?depth=1'))

    def test_build_job_wrong_kind(self):
        with self.assertRaises(jenkins_api.InvalidUrlException) as context_manager:
            self.j.get_build_job({u'url': self.make_url('job/foo/')})
        self.assertEqual(str(context_manager.exception),
                         'invalid url for Build: %s'
                         % self.make_url('job/foo/'))


class JenkinsQueueItemBuildTest(JenkinsTestBase):

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_started(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({u'number': 3})
        item = {
            u'id': 25,
            u'executable': {
                u'number': 3,
                u'url': self.make_url('job/foo/3/'),
            },
        }

        self.assertEqual(self.j.get_queue_item_build(item), {u'number': 3})
        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/foo/3/api/json?depth=1'))

    def test_waiting(self):
        item = {u'id': 25, u'why': u'Waiting for next available executor'}

        with self.assertRaises(jenkins_api.JenkinsException) as context_manager:
            self.j.get_queue_item_build(item)
        self.assertEqual(str(context_manager.exception),
                         'queue number[25] has no build yet')
