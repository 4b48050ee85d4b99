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
.. module:: jenkins_api.endpoints
    :platform: Unix, Windows
    :synopsis: URL keywords of the Jenkins REST endpoints
'''

# Suffix of every JSON API request
API_JSON = '/api/json'

# First segment keywords
JOB = 'job'
VIEW = 'view'
QUEUE = 'queue'
COMPUTER = 'computer'
CRUMB_ISSUER = 'crumbIssuer'

# Queue item segment
QUEUE_ITEM = 'item'

# Job actions
BUILD = 'build'
BUILD_WITH_PARAMETERS = 'buildWithParameters'
POLLING = 'polling'
ENABLE = 'enable'
DISABLE = 'disable'
CONFIG_XML = 'config.xml'

# Build pages
CONSOLE_TEXT = 'consoleText'
MAVEN_ARTIFACTS = 'mavenArtifacts'

# View actions, the job name goes in the query string
ADD_JOB_TO_VIEW = 'addJobToView'
REMOVE_JOB_FROM_VIEW = 'removeJobFromView'

# Name of the master node in /computer/<name>
MASTER_NODE = '(master)'

FORM_HEADERS = {'Content-Type': 'application/x-www-form-urlencoded'}
