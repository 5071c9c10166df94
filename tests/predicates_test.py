from parsez.predicates import always, eq, is_alphanum, is_digit, is_letter, is_lower, is_space, \
    is_unicode_letter, is_upper, ne, never, one_of


def test_composition():
    pred = (is_letter & ~one_of('xyz')) | eq('_')
    assert 'a' >> pred
    assert '_' >> pred
    assert not 'x' >> pred
    assert not '1' >> pred


def test_not_of_not():
    assert 'a' >> ~~is_letter
    assert not '1' >> ~~is_letter


def test_eq_ne():
    assert 'a' >> eq('a')
    assert not 'b' >> eq('a')
    assert 'b' >> ne('a')


def test_always_never():
    assert None >> always
    assert not None >> never


def test_character_classes():
    assert '7' >> is_digit
    assert not 'a' >> is_digit
    assert '\t' >> is_space
    assert '_' >> is_alphanum
    assert not '-' >> is_alphanum
    assert 'Q' >> is_upper
    assert not 'q' >> is_upper
    assert 'q' >> is_lower
    assert not '1' >> is_lower


def test_letters():
    assert 'a' >> is_letter
    assert not 'ą' >> is_letter
    assert 'ą' >> is_unicode_letter
    assert not '哦' >> is_unicode_letter


def test_str():
    assert str(is_digit) == 'is_digit'
    assert str(~is_digit) == '~is_digit'
    assert str(is_letter & is_digit) == '(is_letter & is_digit)'
