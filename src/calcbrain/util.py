class CalcError(Exception):
    '''
    Input the calculator cannot make sense of. Aborts the rest of a line.
    '''
    pass
