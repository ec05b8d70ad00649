"""
Unit tests for Node

Node:
- Plain values become slots with a generated accessor
- Callables become methods called with the node as first argument
- Accessors get with no argument, set with one (falsy values ignored)
- attributes() lists the declared slot names in insertion order
- Member access resolves along the prototype chain
"""

import pytest

pytestmark = pytest.mark.unit


class TestRootConstruction:
    """Test create() on the model"""

    def test_create_with_attributes_and_methods(self, model):
        """Should store plain values as slots and callables as methods"""
        node = model.create({
            'first_name': 'Generic',
            'greet': lambda self: 'hello',
        })

        assert node.first_name() == 'Generic'
        assert node.greet() == 'hello'
        assert node.attributes() == ['first_name']

    def test_create_empty(self, model):
        """Should accept an empty mapping"""
        node = model.create({})

        assert node.attributes() == []
        assert node.prot() is None

    def test_create_with_keyword_arguments(self, model):
        """Should merge keyword members after the mapping (last write wins)"""
        node = model.create({'a': 1, 'b': 2}, b=3, c=4)

        assert node.a() == 1
        assert node.b() == 3
        assert node.c() == 4
        assert node.attributes() == ['a', 'b', 'c']

    def test_method_receives_node_as_self(self, model):
        """Should call methods with the receiving node first"""
        node = model.create(
            count=41,
            next_count=lambda self, step=1: self.count() + step,
        )

        assert node.next_count() == 42
        assert node.next_count(step=9) == 50

    def test_attributes_keep_insertion_order(self, model):
        """Should list attribute names in construction order"""
        node = model.create({'z': 1, 'a': 2, 'm': 3})

        assert node.attributes() == ['z', 'a', 'm']

    def test_attributes_returns_copy(self, model):
        """Should not expose the internal name list"""
        node = model.create(a=1)

        names = node.attributes()
        names.append('b')

        assert node.attributes() == ['a']

    def test_node_ids_are_unique(self, model):
        """Should give every node its own ID"""
        first = model.create()
        second = model.create()

        assert first.node_id != second.node_id
        assert first.node_id.startswith('test-')

    def test_member_named_attrs(self, model):
        """Should accept a member called attrs as a keyword"""
        node = model.create(attrs=5)

        assert node.attrs() == 5
        assert node.attributes() == ['attrs']

    def test_node_values_can_be_nodes(self, model):
        """Should store nodes (not callable) as plain attribute values"""
        address = model.create(city='Springfield')
        person = model.create(address=address)

        assert person.address() is address
        assert person.address().city() == 'Springfield'


class TestAccessors:
    """Test generated getter/setter semantics"""

    def test_getter_returns_value(self, person):
        assert person.first_name() == 'Generic'

    def test_setter_updates_value(self, person):
        """Should store a truthy value and return it"""
        result = person.first_name('Marge')

        assert result == 'Marge'
        assert person.first_name() == 'Marge'

    @pytest.mark.parametrize('falsy', [0, 0.0, '', None, False, '0'])
    def test_setter_ignores_falsy_values(self, person, falsy):
        """Should leave the slot unchanged for falsy values"""
        result = person.first_name(falsy)

        assert result == 'Generic'
        assert person.first_name() == 'Generic'

    def test_setter_accepts_other_values(self, model):
        """Should store any value that isn't falsy"""
        node = model.create(value='start')

        for value in [1, -1, 'x', '00', ' ', [0], True]:
            assert node.value(value) == value
            assert node.value() == value

    @pytest.mark.parametrize('empty', [[], {}, (), set()])
    def test_setter_stores_empty_containers(self, model, empty):
        """Should treat containers as values even when empty"""
        node = model.create(tags=['a'])

        assert node.tags(empty) == empty
        assert node.tags() == empty

    def test_setter_never_calls_bool_on_objects(self, model):
        """Should store objects whose truth value can't be decided"""

        class Ambiguous:
            def __bool__(self):
                raise ValueError('truth value is ambiguous')

        node = model.create(data='start')
        value = Ambiguous()

        assert node.data(value) is value
        assert node.data() is value

    def test_zero_at_construction_is_stored(self, model):
        """Should store falsy values given at construction"""
        node = model.create(count=0, label='')

        assert node.count() == 0
        assert node.label() == ''
        assert node.attributes() == ['count', 'label']

    def test_setter_takes_one_value(self, person):
        with pytest.raises(TypeError):
            person.first_name('a', 'b')

    def test_setter_only_touches_receiver(self, model):
        """Should keep separate values on separate nodes"""
        a = model.create(x=1)
        b = model.create(x=1)

        a.x(5)

        assert a.x() == 5
        assert b.x() == 1

    def test_accessor_is_marked(self, person):
        from prototype_objects import resolve

        assert getattr(resolve(person, 'first_name'), 'is_accessor', False)
        assert not getattr(resolve(person, 'say_hi'), 'is_accessor', False)


class TestNameValidation:
    """Test InvalidArgumentError on bad member names"""

    @pytest.mark.parametrize('name', ['', '1abc', 'has space', 'with-dash'])
    def test_invalid_names_rejected_at_create(self, model, name):
        from prototype_objects import InvalidArgumentError

        with pytest.raises(InvalidArgumentError):
            model.create({name: 1})

    @pytest.mark.parametrize('name', ['extend', 'attributes', 'prot', 'add_method', 'can', 'get_logs', 'node_id', '_slots', '__init__'])
    def test_reserved_names_rejected(self, model, name):
        from prototype_objects import InvalidArgumentError

        with pytest.raises(InvalidArgumentError, match='reserved'):
            model.create({name: 1})

    def test_invalid_argument_is_value_error(self, model):
        from prototype_objects import PrototypeError

        with pytest.raises(ValueError):
            model.create({'': 1})
        with pytest.raises(PrototypeError):
            model.create({'': 1})

    def test_private_names_allowed(self, model):
        """Should accept single-underscore names that aren't internal"""
        node = model.create(_secret='x')

        assert node._secret() == 'x'


class TestMemberAccess:
    """Test dynamic member access and assignment guards"""

    def test_missing_member_raises(self, person):
        from prototype_objects import MemberNotFoundError

        with pytest.raises(MemberNotFoundError) as exc_info:
            person.fly()

        assert exc_info.value.name == 'fly'
        assert exc_info.value.node_id == person.node_id

    def test_missing_member_is_attribute_error(self, person):
        """Should keep hasattr() and getattr() defaults working"""
        assert not hasattr(person, 'fly')
        assert getattr(person, 'fly', 'nope') == 'nope'
        assert hasattr(person, 'say_hi')

    def test_dunder_names_not_resolved(self, person):
        with pytest.raises(AttributeError):
            person.__deepcopy__

    def test_direct_assignment_rejected(self, person):
        """Should refuse new or existing attributes set via ="""
        from prototype_objects import ReadOnlyNodeError

        with pytest.raises(ReadOnlyNodeError):
            person.first_name = 'Marge'
        with pytest.raises(ReadOnlyNodeError):
            person.age = 36

        assert person.first_name() == 'Generic'
        assert 'age' not in person.attributes()

    def test_delete_rejected(self, person):
        from prototype_objects import ReadOnlyNodeError

        with pytest.raises(ReadOnlyNodeError):
            del person.first_name

        assert person.first_name() == 'Generic'

    def test_dir_lists_chain_members(self, person):
        child = person.extend(extra=lambda self: None)

        names = dir(child)

        assert 'say_hi' in names
        assert 'extra' in names
        assert 'first_name' in names
        assert 'extend' in names

    def test_repr(self, person):
        child = person.extend()

        assert person.node_id in repr(person)
        assert 'prototype=None' in repr(person)
        assert f'prototype={person.node_id}' in repr(child)
        assert "'first_name'" in repr(child)
