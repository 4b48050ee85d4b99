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
.. module:: jenkins_api.tree
    :platform: Unix, Windows
    :synopsis: Builder for the ``tree`` query parameter

Jenkins can return a subset of the fields of an object when asked with the
``tree`` query parameter, see
https://www.cloudbees.com/blog/taming-jenkins-json-api-depth-and-tree

Example::

    >>> str(TreeBuilder.object('builds')
    ...     .with_subfield('url')
    ...     .with_subfield('result')
    ...     .with_subfield(TreeBuilder.object('actions')
    ...                    .with_subfield('causes'))
    ...     .build())
    'builds[url,result,actions[causes]]'
'''


class TreeQuery(object):
    '''Immutable ``tree`` query: a field with its sub fields.

    A query without name is a root group, its fields are listed as they are.
    '''

    __slots__ = ('_name', '_fields', '_range')

    def __init__(self, name=None, fields=(), bounds=None):
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_fields', tuple(fields))
        object.__setattr__(self, '_range', bounds)

    def __setattr__(self, name, value):
        raise AttributeError('TreeQuery is immutable')

    @property
    def name(self):
        return self._name

    @property
    def fields(self):
        return self._fields

    @property
    def range(self):
        '''``(start, end)`` limits on an array field, ``end`` may be None.'''
        return self._range

    def __str__(self):
        children = ','.join(str(field) for field in self._fields)
        if self._name is None:
            return children
        rendered = self._name
        if self._fields:
            rendered += '[%s]' % children
        if self._range is not None:
            start, end = self._range
            rendered += '{%s,%s}' % (start, '' if end is None else end)
        return rendered

    def __repr__(self):
        return 'TreeQuery(%r)' % str(self)

    def __eq__(self, other):
        if not isinstance(other, TreeQuery):
            return NotImplemented
        return (self._name, self._fields, self._range) == \
            (other._name, other._fields, other._range)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self._name, self._fields, self._range))


def as_tree(field):
    '''Turn a field name or a builder into a :class:`TreeQuery`.'''
    if isinstance(field, TreeQuery):
        return field
    if isinstance(field, TreeBuilder):
        return field.build()
    if isinstance(field, str):
        return TreeQuery(field)
    raise TypeError('expected a field name, a TreeBuilder or a TreeQuery, '
                    'got %r' % (field,))


class TreeBuilder(object):
    '''Helper to build a :class:`TreeQuery`.

    Fields keep the order they were added in. Field names are not checked,
    Jenkins ignores the ones it does not know.
    '''

    def __init__(self, name=None):
        self._name = name
        self._fields = []
        self._range = None

    @classmethod
    def object(cls, name):
        '''Start a named field which will hold sub fields.'''
        return cls(name)

    def with_field(self, field):
        '''Add a field.

        :param field: field name ``str``, :class:`TreeBuilder` or
            :class:`TreeQuery`
        :returns: this builder
        '''
        self._fields.append(as_tree(field))
        return self

    def with_subfield(self, field):
        return self.with_field(field)

    def with_range(self, start, end=None):
        '''Only return the elements ``start`` (included) to ``end`` (excluded)
        of this array field. Without ``end`` every element from ``start`` is
        returned.
        '''
        if self._name is None:
            raise ValueError('a range can only be set on a named field')
        if start < 0 or (end is not None and end < start):
            raise ValueError('invalid range {%s,%s}' % (start, end))
        self._range = (start, end)
        return self

    def build(self):
        return TreeQuery(self._name, self._fields, self._range)
