import json

from mock import patch

import jenkins_api
from tests.base import JenkinsTestBase


class JenkinsGetBuildTest(JenkinsTestBase):

    build_info = {
        u'building': False,
        u'number': 52,
        u'result': u'SUCCESS',
        u'url': u'http://example.com/job/Test%20Job/52/',
    }

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_simple(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps(self.build_info)

        build_info = self.j.get_build(u'Test Job', 52)

        self.assertEqual(build_info, self.build_info)
        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/Test%20Job/52/api/json?depth=1'))
        self._check_requests(jenkins_mock.call_args_list)

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_alias(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps(self.build_info)

        self.j.get_build(u'Test Job', jenkins_api.ALIASES[0])

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/Test%20Job/lastBuild/api/json?depth=1'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_in_folder_with_tree(self, jenkins_mock):
        jenkins_mock.return_value = json.dumps({u'result': u'SUCCESS'})

        self.j.get_build(u'a Folder/Test Job', 52, tree='result')

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url(
                'job/a%20Folder/job/Test%20Job/52/api/json?tree=result'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_return_none(self, jenkins_mock):
        jenkins_mock.return_value = None

        with self.assertRaises(jenkins_api.JenkinsException) as context_manager:
            self.j.get_build(u'TestJob', 52)
        self.assertEqual(
            str(context_manager.exception),
            'job[TestJob] number[52] does not exist')

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_return_invalid_json(self, jenkins_mock):
        jenkins_mock.return_value = 'Invalid JSON'

        with self.assertRaises(jenkins_api.JenkinsException) as context_manager:
            self.j.get_build(u'TestJob', 52)
        self.assertEqual(
            str(context_manager.exception),
            'Could not parse JSON info for job[TestJob] number[52]')

    def test_invalid_number(self):
        with self.assertRaises(ValueError):
            self.j.get_build(u'TestJob', -1)


class JenkinsBuildConsoleOutputTest(JenkinsTestBase):

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_simple(self, jenkins_mock):
        jenkins_mock.return_value = "build console output..."

        build_info = self.j.get_build_console_output(u'Test Job', 52)

        self.assertEqual(build_info, jenkins_mock.return_value)
        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/Test%20Job/52/consoleText'))
        self._check_requests(jenkins_mock.call_args_list)

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_in_folder(self, jenkins_mock):
        jenkins_mock.return_value = "build console output..."

        self.j.get_build_console_output(u'a Folder/Test Job', 52)

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url('job/a%20Folder/job/Test%20Job/52/consoleText'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_in_nested_folders(self, jenkins_mock):
        jenkins_mock.return_value = "build console output..."

        self.j.get_build_console_output(u'top/middle/Test Job', 'lastBuild')

        self.assertEqual(
            jenkins_mock.call_args[0][0].url,
            self.make_url(
                'job/top/job/middle/job/Test%20Job/lastBuild/consoleText'))

    @patch.object(jenkins_api.Jenkins, 'jenkins_open')
    def test_return_none(self, jenkins_mock):
        jenkins_mock.return_value = None

        with self.assertRaises(jenkins_api.JenkinsException) as context_manager:
            self.j.get_build_console_output(u'TestJob', 52)
        self.assertEqual(
            str(context_manager.exception),
            'job[TestJob] number[52] does not exist')

    @patch.object(jenkins_api.Jenkins, 'jenkins_open',
                  side_effect=jenkins_api.NotFoundException())
    def test_not_found(self, jenkins_mock):
        with self.assertRaises(jenkins_api.JenkinsException) as context_manager:
            self.j.get_build_console_output(u'TestJob', 52)
        self.assertEqual(
            str(context_manager.exception),
            'job[TestJob] number[52] does not exist')
