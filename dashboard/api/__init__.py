from . import navigation, writing, goals, calendar, three_things, fitness

routers = [
    navigation.router,
    writing.router,
    goals.router,
    calendar.router,
    three_things.router,
    fitness.router,
]
