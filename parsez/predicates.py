import operator
import string

from parsez.pipe import as_pipeable, Function

eq = as_pipeable(operator.eq)
ne = as_pipeable(operator.ne)

always = Function(lambda _: True).set_name('always')
never = Function(lambda _: False).set_name('never')


@as_pipeable
def one_of(arg, chars):
    return arg in chars


def _named(func, name):
    return Function(func).set_name(name)


is_digit = _named(lambda c: c in string.digits, 'is_digit')

is_space = _named(str.isspace, 'is_space')

is_underscore = eq('_')

is_letter = _named(lambda c: c.lower() in string.ascii_lowercase, 'is_letter')

# any letter that has an upper and a lower case form
is_unicode_letter = _named(lambda c: c.lower() != c.upper(), 'is_unicode_letter')

is_alphanum = is_letter | is_digit | is_underscore

is_upper = is_letter & _named(str.isupper, 'isupper')

is_lower = is_letter & _named(str.islower, 'islower')
