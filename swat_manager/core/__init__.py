"""
Core building blocks shared by the server and the command line tools.
"""
