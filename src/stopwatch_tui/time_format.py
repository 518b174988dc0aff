from .shared import Milliseconds

MS_PER_HOUR = 3600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1000

def formatTime(ms: Milliseconds) -> str:
    '''
    `HH:MM:SS.CC`. Hours are not wrapped and grow past two digits on 
    very long runs. Used for both totals and lap deltas.  
    '''
    total = int(ms)
    centiseconds = (total % MS_PER_SECOND) // 10
    seconds = total // MS_PER_SECOND % 60
    minutes = total // MS_PER_MINUTE % 60
    hours = total // MS_PER_HOUR
    return f'{hours:02d}:{minutes:02d}:{seconds:02d}.{centiseconds:02d}'
