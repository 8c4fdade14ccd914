# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

import pickle

import pytest

from errtree.display import display_tree
from errtree.mishap import Mishap, wrap_error, wrap_error_tree, wrap_errors
from errtree.serde import SerdeErrorTree
from errtree.tree import ErrorTree, SourceKind

from .helpers.trees import ChainedError, error_chain


def node(msg, *sources):
    return SerdeErrorTree.from_msg_and_sources(msg, sources)


class TestConstructors:
    def test_from_msg(self):
        mishap = Mishap.from_msg('foo')

        assert str(mishap) == 'foo'
        assert list(mishap.sources()) == []

    def test_from_error(self):
        error = error_chain('a', 'b')
        mishap = Mishap.from_error(error)

        assert mishap.inner is error
        assert str(mishap) == 'a'
        assert [source.value for source in mishap.sources()] == [error.__cause__]

    def test_from_error_and_msg(self):
        error = ChainedError('cause')
        mishap = Mishap.from_error_and_msg('context', error)

        sources = list(mishap.sources())
        assert str(mishap) == 'context'
        assert len(sources) == 1
        assert sources[0].kind is SourceKind.CHAIN
        assert sources[0].value is error

    def test_from_errors_and_msg(self):
        mishap = Mishap.from_errors_and_msg('jobs failed', [ChainedError('job 1'), ChainedError('job 2')])

        assert [(source.kind, str(source)) for source in mishap.sources()] == [
            (SourceKind.TREE, 'job 1'),
            (SourceKind.TREE, 'job 2'),
        ]

    def test_from_error_tree(self, jobs_tree):
        mishap = Mishap.from_error_tree(jobs_tree)

        assert mishap.inner is jobs_tree
        assert display_tree(mishap) == display_tree(jobs_tree)

    def test_from_error_tree_and_msg(self, jobs_tree):
        mishap = Mishap.from_error_tree_and_msg('wrapper', jobs_tree)

        assert [source.value for source in mishap.sources()] == [jobs_tree]

    def test_from_error_trees_and_msg(self, jobs_tree):
        other = Mishap.from_msg('other')
        mishap = Mishap.from_error_trees_and_msg('wrapper', iter([jobs_tree, other]))

        assert [source.value for source in mishap.sources()] == [jobs_tree, other]

    def test_from_msg_and_cause_chain(self):
        mishap = Mishap.from_msg_and_cause_chain('a', ['b', 'c'])

        assert mishap.to_serde() == node('a', node('b', node('c')))

    def test_wrap_single(self, jobs_tree):
        mishap = Mishap.from_error_tree(jobs_tree).wrap_single('outer')

        assert mishap.to_serde() == node('outer', jobs_tree.to_serde())

    def test_messages_are_stringified(self):
        assert str(Mishap.from_msg(42)) == '42'
        assert str(Mishap.from_error_trees_and_msg(42, [Mishap.from_msg('x')])) == '42'


class TestCollapse:
    @pytest.mark.parametrize(
        'factory',
        [
            pytest.param(lambda: Mishap.from_error_trees_and_msg('empty', []), id='trees'),
            pytest.param(lambda: Mishap.from_errors_and_msg('empty', []), id='errors'),
            pytest.param(lambda: Mishap.from_borrowed_tree(Mishap.from_msg('empty')), id='borrowed'),
        ],
    )
    def test_empty_branch_is_a_chain(self, factory):
        mishap = factory()

        assert isinstance(mishap.inner, BaseException)
        assert str(mishap) == 'empty'
        assert list(mishap.sources()) == []
        assert display_tree(mishap) == 'empty'


class TestBorrowed:
    def test_error(self):
        error = error_chain('a', 'b', 'c')
        mishap = Mishap.from_borrowed_error(error)

        assert mishap.to_serde() == SerdeErrorTree.from_error(error)
        assert all(source.value is not error.__cause__ for source in mishap.sources())

    def test_tree(self, complex_tree):
        mishap = Mishap.from_borrowed_tree(complex_tree)

        assert display_tree(mishap) == display_tree(complex_tree)
        assert mishap.to_serde() == complex_tree.to_serde()


class TestFromException:
    def test_mishap(self, jobs_tree):
        assert Mishap.from_exception(jobs_tree) is jobs_tree

    def test_plain(self):
        error = ChainedError('foo')

        assert Mishap.from_exception(error).inner is error

    def test_group(self):
        group = ExceptionGroup('failed', [ChainedError('a'), ChainedError('b')])

        assert Mishap.from_exception(group).to_serde() == node('failed', node('a'), node('b'))


class TestWrapError:
    def test_no_error(self):
        calls = []

        with wrap_error(lambda: calls.append(1)):
            pass

        assert not calls

    def test_error(self):
        error = ChainedError('cause')

        with pytest.raises(Mishap) as exc_info, wrap_error('context'):
            raise error

        mishap = exc_info.value
        assert mishap.__cause__ is error
        assert mishap.to_serde() == node('context', node('cause'))

    def test_lazy_message(self):
        with pytest.raises(Mishap) as exc_info, wrap_error(lambda: 'lazy context'):
            raise ChainedError('cause')

        assert str(exc_info.value) == 'lazy context'

    def test_error_tree(self, jobs_tree):
        with pytest.raises(Mishap) as exc_info, wrap_error('context'):
            raise jobs_tree

        assert [source.value for source in exc_info.value.sources()] == [jobs_tree]

    def test_exception_group(self):
        with pytest.raises(Mishap) as exc_info, wrap_error('context'):
            raise ExceptionGroup('group', [ChainedError('a'), ExceptionGroup('nested', [ChainedError('b')])])

        assert exc_info.value.to_serde() == node('context', node('a'), node('nested', node('b')))

    def test_nested(self):
        with pytest.raises(Mishap) as exc_info, wrap_error('outer'), wrap_error('inner'):
            raise ChainedError('cause')

        assert exc_info.value.to_serde() == node('outer', node('inner', node('cause')))


class TestMishap:
    def test_is_exception_and_tree(self):
        mishap = Mishap.from_msg('foo')

        assert isinstance(mishap, Exception)
        assert isinstance(mishap, ErrorTree)

    def test_repr(self):
        assert repr(Mishap.from_msg('foo')) == "Mishap(msg='foo', sources=[])"

    def test_repr_branch(self):
        mishap = Mishap.from_error_trees_and_msg('top', [Mishap.from_msg('a')])

        assert repr(mishap) == "Mishap(msg='top', sources=[Source.tree(Mishap(msg='a', sources=[]))])"

    def test_pickle(self):
        mishap = Mishap.from_error_trees_and_msg('top', [Mishap.from_msg('a'), Mishap.from_msg('b')])

        assert display_tree(pickle.loads(pickle.dumps(mishap))) == display_tree(mishap)

    def test_pickle_chain(self):
        mishap = Mishap.from_error_and_msg('a', error_chain('b', 'c'))
        restored = pickle.loads(pickle.dumps(mishap))

        assert display_tree(restored) == display_tree(mishap)
        assert restored.to_serde() == node('a', node('b', node('c')))

    def test_pickle_branch_of_chains(self, complex_tree):
        assert display_tree(pickle.loads(pickle.dumps(complex_tree))) == display_tree(complex_tree)


class TestWrapErrorTree:
    def test_error_tree(self, jobs_tree):
        with pytest.raises(Mishap) as exc_info, wrap_error_tree(lambda: 'context'):
            raise jobs_tree

        assert str(exc_info.value) == 'context'
        assert [source.value for source in exc_info.value.sources()] == [jobs_tree]

    def test_other_errors_propagate(self):
        error = ChainedError('cause')

        with pytest.raises(ChainedError) as exc_info, wrap_error_tree('context'):
            raise error

        assert exc_info.value is error


class TestWrapErrors:
    def test_exception_group(self):
        with pytest.raises(Mishap) as exc_info, wrap_errors('context'):
            raise ExceptionGroup('group', [ChainedError('a'), ChainedError('b')])

        assert exc_info.value.to_serde() == node('context', node('a'), node('b'))

    def test_other_errors_propagate(self, jobs_tree):
        with pytest.raises(Mishap) as exc_info, wrap_errors('context'):
            raise jobs_tree

        assert exc_info.value is jobs_tree
