"""
Command layer tests (CommandCallable lifecycle and the Errors collection).

Scope
- Class-level call as a factory; instance-level call as one-shot execution.
- success / failure / result before and after execution.
- Errors: ordering, duplicate suppression, bulk add, full messages.
- conforms / entry_point classification of custom commands.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from courier import CommandAlreadyCalledError, CommandCallable, Errors, conforms, entry_point


class Greet(CommandCallable):
    def __init__(self, name=None):
        self.name = name

    def call(self):
        """greet someone by name"""
        if not self.name:
            self.errors.add("name", "is required")
            return None
        return f"hello {self.name}"


class Explode(CommandCallable):
    def call(self):
        raise ZeroDivisionError("boom")


class Unimplemented(CommandCallable):
    pass


class CommandCallableTest(TestCase):
    def testClassCallReturnsExecutedInstance(self):
        command = Greet.call(name="ada")
        self.assertIsInstance(command, Greet)
        self.assertTrue(command.called)
        self.assertTrue(command.success)
        self.assertTrue(command.successful)
        self.assertFalse(command.failure)
        self.assertEqual(command.result, "hello ada")

    def testPositionalArguments(self):
        self.assertEqual(Greet.call("ada").result, "hello ada")

    def testFailureWhenErrorsRecorded(self):
        command = Greet.call()
        self.assertTrue(command.failure)
        self.assertFalse(command.success)
        self.assertIsNone(command.result)
        self.assertEqual(command.errors["name"], ["is required"])

    def testStateBeforeCall(self):
        command = Greet("ada")
        self.assertFalse(command.called)
        self.assertFalse(command.success)
        self.assertFalse(command.failure)
        self.assertIsNone(command.result)

    def testInstanceCallReturnsSelf(self):
        command = Greet("ada")
        self.assertIs(command.call(), command)
        self.assertEqual(command.result, "hello ada")

    def testSecondCallRaises(self):
        command = Greet.call(name="ada")
        with self.assertRaises(CommandAlreadyCalledError) as context:
            command.call()
        self.assertIn("Greet", context.exception.message)
        self.assertIsInstance(context.exception, RuntimeError)

    def testExceptionsPropagate(self):
        with self.assertRaises(ZeroDivisionError):
            Explode.call()

    def testMissingCallRaisesNotImplemented(self):
        with self.assertRaises(NotImplementedError):
            Unimplemented.call()

    def testSuperCallChains(self):
        class Base(CommandCallable):
            def call(self):
                return "base"

        class Child(Base):
            def call(self):
                return super().call() + "+child"

        command = Child.call()
        self.assertEqual(command.result, "base+child")
        self.assertTrue(command.success)
        self.assertEqual(Base.call().result, "base")

        with self.assertRaises(CommandAlreadyCalledError):
            command.call()

    def testInheritedCallRunsOnce(self):
        class Base(CommandCallable):
            def call(self):
                return type(self).__name__

        class Child(Base):
            pass

        command = Child.call()
        self.assertEqual(command.result, "Child")
        with self.assertRaises(CommandAlreadyCalledError):
            command.call()

    def testSecondCallRaisesAfterFailingBody(self):
        command = Explode()
        with self.assertRaises(ZeroDivisionError):
            command.call()
        with self.assertRaises(CommandAlreadyCalledError):
            command.call()

    def testFactoryKeepsName(self):
        self.assertEqual(Greet.call.__name__, "call")
        self.assertEqual(Greet.call.__doc__, "greet someone by name")

    def testErrorsAreIndependentPerInstance(self):
        first = Greet.call()
        second = Greet.call(name="ada")
        self.assertTrue(first.errors.any())
        self.assertFalse(second.errors.any())

    def testRepr(self):
        self.assertEqual(repr(Greet.call(name="ada")), "Greet(result='hello ada', success=True, errors=Errors({}))")


class ErrorsTest(TestCase):
    def setUp(self):
        self.errors = Errors()

    def testAddKeepsOrderAndSuppressesDuplicates(self):
        self.errors.add("email", "is required")
        self.errors.add("email", "is invalid")
        self.assertEqual(self.errors.add("email", "is required"), ["is required", "is invalid"])
        self.assertEqual(len(self.errors), 1)

    def testItemsAreCopies(self):
        self.errors.add("email", "is required")
        self.errors["email"].append("mutated")
        self.assertEqual(self.errors["email"], ["is required"])

    def testMissingField(self):
        self.assertNotIn("email", self.errors)
        with self.assertRaises(KeyError):
            self.errors["email"]

    def testAddMultiple(self):
        self.errors.add_multiple({
            "email": ["is required", "is invalid"],
            "password": "is too short",
            "name": None,
        })
        self.assertEqual(self.errors["email"], ["is required", "is invalid"])
        self.assertEqual(self.errors["password"], ["is too short"])
        self.assertNotIn("name", self.errors)

    def testAddMultipleErrorsAlias(self):
        self.errors.add_multiple_errors({"email": "is required"})
        self.assertEqual(list(self.errors.pairs()), [("email", "is required")])

    def testFullMessages(self):
        self.errors.add("email", "is required")
        self.errors.add(Errors.BASE, "Something went wrong")
        self.errors.add("user.name", "is taken")
        self.assertEqual(
            self.errors.full_messages(),
            ["Email is required", "Something went wrong", "User_name is taken"]
        )

    def testAnyAndClear(self):
        self.assertFalse(self.errors.any())
        self.errors.add("email", "is required")
        self.assertTrue(self.errors.any())
        self.errors.clear()
        self.assertFalse(self.errors.any())


class CustomCommand:
    @classmethod
    def call(cls, value):
        return value


class StaticCommand:
    @staticmethod
    def call():
        return "static"


class InstanceOnly:
    def call(self):
        return "instance"


class ClassificationTest(TestCase):
    def testConforms(self):
        self.assertTrue(conforms(Greet))
        self.assertFalse(conforms(CustomCommand))
        self.assertFalse(conforms(Greet("ada")))

    def testEntryPoint(self):
        self.assertEqual(entry_point(CustomCommand)(1), 1)
        self.assertEqual(entry_point(StaticCommand)(), "static")
        self.assertIsNotNone(entry_point(Greet))
        self.assertIsNone(entry_point(InstanceOnly))
        self.assertIsNone(entry_point(object))


if __name__ == "__main__":
    unittest.main()
