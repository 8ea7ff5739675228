"""Worked solutions to the logic of several course exercises."""