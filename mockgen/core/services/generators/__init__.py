"""
Generators — scan generator sources and render mock action classes.

``symbols`` finds exported generator functions in a source file;
``mock_class`` renders the class file wrapping one of them.
"""
